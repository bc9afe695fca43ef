"""
Category listing services.

Startup pipeline for the category admin pages:
- category_config     - Static category definitions and the registry
- category_validator  - Drops categories missing or misnamed in the taxonomy
- notice_reporter     - Deferred admin notice for dropped categories
- route_registrar     - One admin page per remaining category
- category_content    - Query and render a category's latest posts
- category_listing    - Runs the stages above once at startup
"""
