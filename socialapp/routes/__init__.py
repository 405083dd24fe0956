from fastapi import APIRouter
from . import friends, messages, posts, stubs, status, users

# stubs first: '/users/friends' and '/users/followers' must match before '/users/{username}'
ROUTE_MODULES = [stubs, users, posts, friends, messages, status]

def build_router() -> APIRouter:
    router = APIRouter()
    for module in ROUTE_MODULES:
        for method, path, handler, response_model in module.ROUTES:
            router.add_api_route(
                path,
                handler,
                methods=[method],
                response_model=response_model,
                tags=[module.TAG],
            )
    return router

router = build_router()
