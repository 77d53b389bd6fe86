"""Routing backend endpoint paths."""

PLAN_ROUTE_PATH = "/plan_route"
RECURRING_ROUTES_PATH = "/recurring-routes"

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}
