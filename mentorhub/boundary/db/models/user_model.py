"""
User ORM models.

Represents a registered mentor or student and the ordered list of courses
they are interested in. Course entries live in their own table so that
course-overlap matching and course substring search run as SQL predicates.

Dependencies: sqlalchemy, mentorhub.boundary.db.base
System role: Credential store persistence
"""

from uuid import UUID

from sqlalchemy import JSON, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mentorhub.boundary.db.base import Base, TimestampMixin, UUIDMixin
from mentorhub.core.roles import UserRole

user_role_enum = Enum(
    UserRole,
    name="user_role",
    values_callable=lambda roles: [role.value for role in roles],
)


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model.

    Username and email uniqueness is enforced by unique indexes, so two
    concurrent registrations cannot both persist the same identity.

    Attributes:
        id: UUID primary key (auto-generated)
        username: Unique login name
        email: Unique email address
        password_hash: One-way hash of the password (never the raw value)
        role: mentor or student (default student)
        contact: Ordered contact strings
        course_entries: Ordered UserCourseModel rows (cascade delete)
        created_at: Registration timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Constraints:
        username: UNIQUE
        email: UNIQUE
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )
    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        user_role_enum,
        nullable=False,
        default=UserRole.STUDENT,
        index=True,
    )
    contact: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Contact strings split from the comma-separated registration field",
    )

    # Relationships
    course_entries = relationship(
        "UserCourseModel",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserCourseModel.position",
        lazy="selectin",
    )

    @property
    def courses(self) -> list[str]:
        """Course identifiers in registration order (duplicates kept)."""
        return [entry.course for entry in self.course_entries]


class UserCourseModel(Base):
    """
    One course entry of a user's course list.

    Attributes:
        user_id: Owning user (cascade delete)
        position: Index of the entry within the user's list
        course: Course identifier
    """

    __tablename__ = "user_courses"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    course: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    user = relationship("UserModel", back_populates="course_entries")
