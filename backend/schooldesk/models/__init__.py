# Import every model so its table is registered in Base.metadata before
# SQLAlchemy resolves relationships and foreign keys between models.

from schooldesk.models.teacher import Teacher  # noqa: F401
from schooldesk.models.user import User  # noqa: F401
from schooldesk.models.student import Student  # noqa: F401
from schooldesk.models.course import Course  # noqa: F401
from schooldesk.models.schedule import Schedule  # noqa: F401
from schooldesk.models.enrollment import Enrollment  # noqa: F401
from schooldesk.models.grade import Grade  # noqa: F401
from schooldesk.models.attendance import Attendance  # noqa: F401
