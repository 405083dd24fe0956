from .friends import FriendConcept
from .messages import MessageConcept
from .posts import PostConcept
from .statuses import StatusConcept
from .users import UserConcept
from .websession import WebSessionConcept

# App definition using concepts
WebSession = WebSessionConcept()
User = UserConcept()
Post = PostConcept()
Friend = FriendConcept()
Status = StatusConcept()
Message = MessageConcept()
