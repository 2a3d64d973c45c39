# Registers EVERY model on the same registry (import side effects, keep them)
from app.db.base_class import Base # noqa
from app.models.student import Student # noqa
from app.models.teacher import Teacher # noqa
