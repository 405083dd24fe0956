"""
Endpoints that are part of the public API but not built yet. Each one
answers 501 so clients can tell them apart from unknown paths.
"""
from ..errors import NotImplementedFeatureError


def not_implemented(feature: str):
    async def handler():
        raise NotImplementedFeatureError(feature)
    handler.__name__ = feature.replace(' ', '_')
    return handler


TAG = 'unimplemented'

ROUTES = [
    ('GET', '/users/friends', not_implemented('user friends'), None),
    ('GET', '/users/followers', not_implemented('user followers'), None),
    ('GET', '/feed', not_implemented('create feed'), None),
    ('PATCH', '/feed', not_implemented('refresh feed'), None),
    ('GET', '/feed/next', not_implemented('next in feed'), None),
    ('PATCH', '/music/play', not_implemented('start playback'), None),
    ('PATCH', '/music/pause', not_implemented('stop playback'), None),
    ('PUT', '/music/skip', not_implemented('skip forward'), None),
    ('PUT', '/music/back', not_implemented('skip backward'), None),
    ('PATCH', '/music/add/{id}', not_implemented('add to queue'), None),
    ('PUT', '/music/play/{id}', not_implemented('play song'), None),
]
