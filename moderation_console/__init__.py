"""YouTube Video Moderation Console Backend.

A management console for a single YouTube video: metadata, comment
listing and moderation, free-form notes and an append-only audit trail.

Modules:
    - core: Configuration, database, logging and middleware setup
    - modules.audit: Append-only audit trail of upstream actions
    - modules.youtube: YouTube Data API client
    - modules.comment: Comment pagination and delete resolution
    - modules.moderation: Orchestration of comment and video operations
    - modules.video: Video metadata endpoints
    - modules.note: Notes about the video
    - modules.oauth: OAuth token helper for obtaining an access token
"""

__version__ = "0.1.0"
