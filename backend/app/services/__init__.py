# Services package init
"""
Memos Backend — Services Layer
===============================

What:  Business logic between routes (HTTP) and the Store (persistence).

Service Inventory:
    - TagService: validation, store error translation, tag suggestions
    - ActivityService: records audit activities (tag.create)
    - tag_extractor: pure hashtag extraction from memo content

Services receive the Store as an argument, so they can be exercised
against any Store implementation without HTTP.
"""
