"""Route handlers following Single Responsibility Principle

Each router module handles a single resource/concept:
- health: liveness endpoint
- drive: one-level folder/document listing
- folders: folder creation
- documents: document create/read/update
- assets: static front-end fallback (must be included last)
"""
