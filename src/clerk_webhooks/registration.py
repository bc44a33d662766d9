"""Handler registration: the caller-owned configuration for a webhooks endpoint."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeVar, Union

from starlette.responses import Response

from clerk_webhooks.models.payloads import (
    DeletedObjectJSON,
    EmailJSON,
    OrganizationDomainJSON,
    OrganizationInvitationJSON,
    OrganizationJSON,
    OrganizationMembershipJSON,
    PermissionJSON,
    RoleJSON,
    SessionJSON,
    SMSMessageJSON,
    UserJSON,
    WaitlistEntryJSON,
)

P = TypeVar("P")

# What a handler may return: nothing (acknowledge with 200) or its own response,
# directly or from a coroutine.
HandlerResult = Union[Response, None, Awaitable[Union[Response, None]]]
HandlerFn = Callable[[P], HandlerResult]


class HandlerErrorPolicy(StrEnum):
    PROPAGATE = "propagate"
    RESPOND = "respond"


@dataclass(frozen=True)
class WebhookRegistrationConfig:
    """Secret override plus one optional handler per Clerk event type.

    Unset handlers mean the event type is answered with 404. The object is
    read on every request and never mutated.
    """

    secret: str | None = None

    on_email_created: HandlerFn[EmailJSON] | None = None
    on_organization_created: HandlerFn[OrganizationJSON] | None = None
    on_organization_deleted: HandlerFn[DeletedObjectJSON] | None = None
    on_organization_updated: HandlerFn[OrganizationJSON] | None = None
    on_organization_domain_created: HandlerFn[OrganizationDomainJSON] | None = None
    on_organization_domain_deleted: HandlerFn[DeletedObjectJSON] | None = None
    on_organization_domain_updated: HandlerFn[OrganizationDomainJSON] | None = None
    on_organization_invitation_accepted: HandlerFn[OrganizationInvitationJSON] | None = None
    on_organization_invitation_created: HandlerFn[OrganizationInvitationJSON] | None = None
    on_organization_invitation_revoked: HandlerFn[OrganizationInvitationJSON] | None = None
    on_organization_membership_created: HandlerFn[OrganizationMembershipJSON] | None = None
    on_organization_membership_deleted: HandlerFn[DeletedObjectJSON] | None = None
    on_organization_membership_updated: HandlerFn[OrganizationMembershipJSON] | None = None
    on_permission_created: HandlerFn[PermissionJSON] | None = None
    on_permission_deleted: HandlerFn[DeletedObjectJSON] | None = None
    on_permission_updated: HandlerFn[PermissionJSON] | None = None
    on_role_created: HandlerFn[RoleJSON] | None = None
    on_role_deleted: HandlerFn[DeletedObjectJSON] | None = None
    on_role_updated: HandlerFn[RoleJSON] | None = None
    on_session_created: HandlerFn[SessionJSON] | None = None
    on_session_ended: HandlerFn[SessionJSON] | None = None
    on_session_pending: HandlerFn[SessionJSON] | None = None
    on_session_removed: HandlerFn[SessionJSON] | None = None
    on_session_revoked: HandlerFn[SessionJSON] | None = None
    on_sms_created: HandlerFn[SMSMessageJSON] | None = None
    on_user_created: HandlerFn[UserJSON] | None = None
    on_user_created_at_edge: HandlerFn[UserJSON] | None = None
    on_user_deleted: HandlerFn[DeletedObjectJSON] | None = None
    on_user_updated: HandlerFn[UserJSON] | None = None
    on_waitlist_entry_created: HandlerFn[WaitlistEntryJSON] | None = None
    on_waitlist_entry_updated: HandlerFn[WaitlistEntryJSON] | None = None

    # Handler exceptions propagate to the host by default; RESPOND turns them into a 500.
    handler_errors: HandlerErrorPolicy = HandlerErrorPolicy.PROPAGATE
    # Answer verification failures with "Error occured", as older deployments did.
    legacy_error_body: bool = False
    # Verify the raw request bytes instead of the re-serialized JSON body.
    verify_raw_body: bool = False
