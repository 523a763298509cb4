# /app/db/base_class.py

from sqlalchemy.orm import declarative_base, declared_attr


class _TableNameMixin:
    # Models without an explicit __tablename__ get a pluralized lower-case name.
    @declared_attr
    def __tablename__(cls) -> str:
        return f"{cls.__name__.lower()}s"


Base = declarative_base(cls=_TableNameMixin)
