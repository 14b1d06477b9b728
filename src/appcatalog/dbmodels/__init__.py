"""
Database models for the application catalog.

The catalog tables are populated by an external process; these declarations
describe the schema the API reads from so queries are composed against typed
columns. Column names follow the word-separated (snake_case) convention.
"""

from sqlalchemy import (
    ARRAY,
    JSON,
    BigInteger,
    ForeignKeyConstraint,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# PostgreSQL stores screenshot lists as text[]; SQLite has no array type.
StringList = ARRAY(Text).with_variant(JSON(), "sqlite")


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class App(Base):
    __tablename__ = "app"
    __table_args__ = (PrimaryKeyConstraint("id", name="app_pkey"),)

    id: Mapped[int] = mapped_column(Integer, autoincrement=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    icon_url: Mapped[str | None] = mapped_column(Text)
    screenshot_urls: Mapped[list[str]] = mapped_column(StringList, nullable=False)
    repo_url: Mapped[str | None] = mapped_column(Text)
    license: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    updated_at: Mapped[int] = mapped_column(BigInteger, nullable=False)


class Category(Base):
    __tablename__ = "category"
    __table_args__ = (PrimaryKeyConstraint("id", name="category_pkey"),)

    id: Mapped[int] = mapped_column(Integer, autoincrement=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    updated_at: Mapped[int] = mapped_column(BigInteger, nullable=False)


class Person(Base):
    __tablename__ = "person"
    __table_args__ = (PrimaryKeyConstraint("id", name="person_pkey"),)

    id: Mapped[int] = mapped_column(Integer, autoincrement=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str | None] = mapped_column(Text)
    web_url: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    updated_at: Mapped[int] = mapped_column(BigInteger, nullable=False)


class Release(Base):
    __tablename__ = "release"
    __table_args__ = (
        ForeignKeyConstraint(
            ["app_id"],
            ["app.id"],
            ondelete="CASCADE",
            name="release_app_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="release_pkey"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=False)
    app_id: Mapped[int] = mapped_column(Integer, nullable=False)
    version: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    download_url: Mapped[str] = mapped_column(Text, nullable=False)
    web_url: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    updated_at: Mapped[int] = mapped_column(BigInteger, nullable=False)


class User(Base):
    __tablename__ = "user"
    __table_args__ = (PrimaryKeyConstraint("id", name="user_pkey"),)

    # Subject issued by the identity provider
    id: Mapped[str] = mapped_column(Text)
    name: Mapped[str | None] = mapped_column(Text)
    email: Mapped[str | None] = mapped_column(Text)
    avatar_url: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    updated_at: Mapped[int] = mapped_column(BigInteger, nullable=False)


class AppAuthorMap(Base):
    __tablename__ = "app_author_map"
    __table_args__ = (
        ForeignKeyConstraint(["app_id"], ["app.id"], name="app_author_map_app_id_fkey"),
        ForeignKeyConstraint(["person_id"], ["person.id"], name="app_author_map_person_id_fkey"),
        PrimaryKeyConstraint("app_id", "person_id", name="app_author_map_pkey"),
    )

    app_id: Mapped[int] = mapped_column(Integer)
    person_id: Mapped[int] = mapped_column(Integer)


class AppMaintainerMap(Base):
    __tablename__ = "app_maintainer_map"
    __table_args__ = (
        ForeignKeyConstraint(["app_id"], ["app.id"], name="app_maintainer_map_app_id_fkey"),
        ForeignKeyConstraint(
            ["person_id"], ["person.id"], name="app_maintainer_map_person_id_fkey"
        ),
        PrimaryKeyConstraint("app_id", "person_id", name="app_maintainer_map_pkey"),
    )

    app_id: Mapped[int] = mapped_column(Integer)
    person_id: Mapped[int] = mapped_column(Integer)


class AppCategoryMap(Base):
    __tablename__ = "app_category_map"
    __table_args__ = (
        ForeignKeyConstraint(["app_id"], ["app.id"], name="app_category_map_app_id_fkey"),
        ForeignKeyConstraint(
            ["category_id"], ["category.id"], name="app_category_map_category_id_fkey"
        ),
        PrimaryKeyConstraint("app_id", "category_id", name="app_category_map_pkey"),
    )

    app_id: Mapped[int] = mapped_column(Integer)
    category_id: Mapped[int] = mapped_column(Integer)


# Expose metadata for schema creation in tests and tooling
target_metadata = Base.metadata

__all__ = [
    "Base",
    "App",
    "Category",
    "Person",
    "Release",
    "User",
    "AppAuthorMap",
    "AppMaintainerMap",
    "AppCategoryMap",
    "target_metadata",
]
