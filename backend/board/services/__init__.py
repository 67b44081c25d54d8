# Services package init
"""
Board Backend — Services Layer
===============================

What:  Business logic between routes (HTTP) and storage (database, disk).
How:   Services accept request data, apply the rules, and return response
       schemas or raise BoardError subclasses.

Service Inventory:
    - PostService:  post/comment operations, vote bounds, not-found mapping
    - ImageService: image upload and retrieval on the upload directory
"""
