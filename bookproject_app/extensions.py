"""Application-wide extensions.

Extension instances live here so blueprints and services can import them
without circular dependencies.
"""

from flask_login import LoginManager
from flask_wtf import CSRFProtect

from .db_instance import db

login_manager = LoginManager()
# Sign-in screens belong to the host application; unauthenticated requests get 401.
login_manager.login_view = None
login_manager.login_message_category = "info"

csrf_protect = CSRFProtect()

__all__ = ["db", "login_manager", "csrf_protect"]
