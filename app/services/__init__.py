"""Services package — all business logic lives here, never in routers.

Files:
  author.py  — author CRUD and listing
  post.py    — post CRUD, publish-date rules, listing (all posts / by author)
  auth.py    — admin registration, login, bearer-token resolution

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
