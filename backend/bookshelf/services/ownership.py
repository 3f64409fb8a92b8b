"""
Bookshelf API — Ownership Policy
=================================

What:  Decides who may create, update and delete records.
Why:   Ownership is optional. Some deployments sit behind an authentication
       proxy and want per-caller records; others are a shared catalogue.
How:   Disabled (the default): no owner is recorded and every caller may
       mutate every record.
       Enabled: the caller identity comes from a trusted request header set
       by the authentication layer. Create stamps it as the owner; update and
       delete require it to match the stored owner. Reads are never restricted.
"""

from dataclasses import dataclass
from typing import Optional

from starlette.requests import Request

from bookshelf.config import Settings
from bookshelf.exceptions import OwnershipError
from bookshelf.models.document import Document


@dataclass(frozen=True)
class OwnershipPolicy:
    enabled: bool = False
    header: str = "X-Owner-ID"

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "OwnershipPolicy":
        return cls(enabled=app_settings.enforce_ownership, header=app_settings.owner_header)

    def resolve_caller(self, request: Request) -> Optional[str]:
        """FastAPI dependency: the caller identity, or None when unknown or disabled."""
        if not self.enabled:
            return None
        value = request.headers.get(self.header, "").strip()
        return value or None

    def owner_for_new_record(self, caller: Optional[str]) -> Optional[str]:
        if not self.enabled:
            return None
        if caller is None:
            raise OwnershipError(
                message="Authentication is required to create this resource",
                context={"header": self.header},
            )
        return caller

    def require_owner(self, document: Document, caller: Optional[str]) -> None:
        """Raises OwnershipError unless `caller` owns `document`."""
        if not self.enabled:
            return
        if caller is None:
            raise OwnershipError(
                message="Authentication is required to modify this resource",
                context={"header": self.header, "document_id": document.id},
            )
        if document.owner != caller:
            raise OwnershipError(
                context={"document_id": document.id, "caller": caller},
            )
