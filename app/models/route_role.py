"""
app/models/route_role.py

Purpose: Route-role permission mapping

- Grants a role access to a project route
"""

from app.models.common import Bookkeeping


class RouteRole(Bookkeeping):
    route_id: str
    role_id: str
