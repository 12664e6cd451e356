from uuid import UUID


class DuplicateMessageTitleError(Exception):
    """Raised by a repository when storage rejects a duplicate title."""

    def __init__(self, organization_id: UUID, title: str):
        self.organization_id = organization_id
        self.title = title
        super().__init__(
            f"Title {title!r} already used in organization {organization_id}"
        )
