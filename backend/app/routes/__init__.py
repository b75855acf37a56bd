# Routes package init
"""
Memos Backend — API Routes Package
===================================

Route Inventory:
    - tag.py:     POST /api/tag              (create/upsert tag)
                  GET  /api/tag              (list caller's tags)
                  GET  /api/tag/suggestion   (unregistered hashtags from memos)
                  POST /api/tag/delete       (delete tag by name)
    - health.py:  GET  /health               (service health check)

Routes stay thin: resolve the user, decode the body, call the service,
wrap the result. Business rules live in app/services.
"""
