# Routes package init
"""
Board Backend — API Routes Package
===================================

Route Inventory:
    - posts.py:   GET    /api/posts                    (list, newest first)
                  GET    /api/posts/search?query=      (substring search)
                  GET    /api/posts/{id}               (single post)
                  POST   /api/posts                    (create)
                  PUT    /api/posts/{id}               (update title/content)
                  DELETE /api/posts/{id}               (delete with comments)
                  POST   /api/posts/{postId}/comments  (add comment)
                  PATCH  /api/posts/{postId}/vote      (vote ±1)
    - images.py:  POST   /api/images/upload            (multipart upload)
                  GET    /api/images/{fileName}        (serve image)
    - health.py:  GET    /health                       (service health check)

Routes stay thin: extract request data, call a service, return its result.
Failures propagate as BoardError to the global handler in main.py.
"""
