"""
Per-request batched field loaders.

Each relational field has a slot for a strawberry ``DataLoader``. No loaders
are registered; field resolvers call the service layer directly, and a slot
left as ``None`` means the field is resolved one parent at a time.
"""

from dataclasses import dataclass

from strawberry.dataloader import DataLoader

from ..records import AppRecord, CategoryRecord, PersonRecord, ReleaseRecord


@dataclass
class Loaders:
    app_authors: DataLoader[int, list[PersonRecord]] | None = None
    app_maintainers: DataLoader[int, list[PersonRecord]] | None = None
    app_categories: DataLoader[int, list[CategoryRecord]] | None = None
    app_releases: DataLoader[int, list[ReleaseRecord]] | None = None
    category_apps: DataLoader[int, list[AppRecord]] | None = None
    person_apps: DataLoader[int, list[AppRecord]] | None = None
    release_app: DataLoader[int, AppRecord | None] | None = None

    def registered(self) -> list[str]:
        """Names of the fields that have a loader attached."""
        return [name for name, loader in vars(self).items() if loader is not None]
