"""
Error hierarchy for the SocialApp API.

Every error carries a user-facing ``message`` and an optional ``context``
dict that is logged but never returned to the client. ``status_code`` is the
HTTP status the exception handler in ``main.py`` answers with.

    SocialAppError
    ├── BadValuesError               400
    │   └── SelfRequestError         400
    ├── UnauthenticatedError         401
    │   └── InvalidCredentialsError  401
    ├── NotAllowedError              403
    │   ├── AlreadyAuthenticatedError
    │   ├── DuplicateUsernameError
    │   ├── ForbiddenError
    │   ├── AlreadyFriendsError
    │   └── RequestAlreadyExistsError
    ├── NotFoundError                404
    │   ├── NoSuchRequestError
    │   └── NotFriendsError
    └── NotImplementedFeatureError   501
"""
import re
from typing import Any, Dict, Optional


class SocialAppError(Exception):
    status_code = 500

    def __init__(self, message: str = "An unexpected error occurred", context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    @property
    def error_name(self) -> str:
        name = type(self).__name__
        if name.endswith('Error'):
            name = name[:-len('Error')]
        return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()


class BadValuesError(SocialAppError):
    status_code = 400


class SelfRequestError(BadValuesError):
    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__("Cannot send a friend request to yourself!", context)


class UnauthenticatedError(SocialAppError):
    status_code = 401

    def __init__(self, message: str = "Must be logged in!", context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)


class InvalidCredentialsError(UnauthenticatedError):
    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__("Username or password is incorrect.", context)


class NotAllowedError(SocialAppError):
    status_code = 403


class AlreadyAuthenticatedError(NotAllowedError):
    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__("Must be logged out!", context)


class DuplicateUsernameError(NotAllowedError):
    def __init__(self, username: str):
        super().__init__(f"User with username {username} already exists!", {'username': username})


class ForbiddenError(NotAllowedError):
    def __init__(self, user, resource: str, resource_id):
        super().__init__(
            f"{user} is not the owner of {resource} {resource_id}!",
            {'user': str(user), 'resource': resource, 'resource_id': str(resource_id)},
        )


class AlreadyFriendsError(NotAllowedError):
    def __init__(self, user1, user2):
        super().__init__(f"{user1} and {user2} are already friends!", {'user1': str(user1), 'user2': str(user2)})


class RequestAlreadyExistsError(NotAllowedError):
    def __init__(self, from_user, to_user):
        super().__init__(
            f"Friend request between {from_user} and {to_user} already exists!",
            {'from': str(from_user), 'to': str(to_user)},
        )


class NotFoundError(SocialAppError):
    status_code = 404

    def __init__(self, resource: str = "resource", resource_id: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} {resource_id} does not exist!"
        ctx = context or {}
        ctx['resource'] = resource
        if resource_id is not None:
            ctx['resource_id'] = str(resource_id)
        super().__init__(message, ctx)


class NoSuchRequestError(NotFoundError):
    def __init__(self, from_user, to_user):
        SocialAppError.__init__(
            self,
            f"Friend request from {from_user} to {to_user} does not exist!",
            {'from': str(from_user), 'to': str(to_user)},
        )


class NotFriendsError(NotFoundError):
    def __init__(self, user1, user2):
        SocialAppError.__init__(
            self,
            f"Friendship between {user1} and {user2} not found!",
            {'user1': str(user1), 'user2': str(user2)},
        )


class NotImplementedFeatureError(SocialAppError):
    status_code = 501

    def __init__(self, feature: str):
        super().__init__("Not Implemented", {'feature': feature})
