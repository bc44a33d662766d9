"""Clerk event catalog: wire event types, config fields and payload types.

The catalog tracks Clerk's webhook event list. Supporting a new event type
means adding an ``EventType`` member, a row in ``EVENT_CATALOG`` and the
matching ``on_*`` field on ``WebhookRegistrationConfig``.
"""

from dataclasses import dataclass
from enum import StrEnum

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


class EventType(StrEnum):
    EMAIL_CREATED = "email.created"
    ORGANIZATION_CREATED = "organization.created"
    ORGANIZATION_DELETED = "organization.deleted"
    ORGANIZATION_UPDATED = "organization.updated"
    ORGANIZATION_DOMAIN_CREATED = "organizationDomain.created"
    ORGANIZATION_DOMAIN_DELETED = "organizationDomain.deleted"
    ORGANIZATION_DOMAIN_UPDATED = "organizationDomain.updated"
    ORGANIZATION_INVITATION_ACCEPTED = "organizationInvitation.accepted"
    ORGANIZATION_INVITATION_CREATED = "organizationInvitation.created"
    ORGANIZATION_INVITATION_REVOKED = "organizationInvitation.revoked"
    ORGANIZATION_MEMBERSHIP_CREATED = "organizationMembership.created"
    ORGANIZATION_MEMBERSHIP_DELETED = "organizationMembership.deleted"
    ORGANIZATION_MEMBERSHIP_UPDATED = "organizationMembership.updated"
    PERMISSION_CREATED = "permission.created"
    PERMISSION_DELETED = "permission.deleted"
    PERMISSION_UPDATED = "permission.updated"
    ROLE_CREATED = "role.created"
    ROLE_DELETED = "role.deleted"
    ROLE_UPDATED = "role.updated"
    SESSION_CREATED = "session.created"
    SESSION_ENDED = "session.ended"
    SESSION_PENDING = "session.pending"
    SESSION_REMOVED = "session.removed"
    SESSION_REVOKED = "session.revoked"
    SMS_CREATED = "sms.created"
    USER_CREATED = "user.created"
    USER_CREATED_AT_EDGE = "user.createdAtEdge"
    USER_DELETED = "user.deleted"
    USER_UPDATED = "user.updated"
    WAITLIST_ENTRY_CREATED = "waitlistEntry.created"
    WAITLIST_ENTRY_UPDATED = "waitlistEntry.updated"


@dataclass(frozen=True)
class EventRoute:
    """One catalog row: which config field handles an event, and its payload type."""

    event_type: EventType
    config_field: str
    payload_type: type


EVENT_CATALOG: tuple[EventRoute, ...] = (
    EventRoute(EventType.EMAIL_CREATED, "on_email_created", EmailJSON),
    EventRoute(EventType.ORGANIZATION_CREATED, "on_organization_created", OrganizationJSON),
    EventRoute(EventType.ORGANIZATION_DELETED, "on_organization_deleted", DeletedObjectJSON),
    EventRoute(EventType.ORGANIZATION_UPDATED, "on_organization_updated", OrganizationJSON),
    EventRoute(EventType.ORGANIZATION_DOMAIN_CREATED, "on_organization_domain_created", OrganizationDomainJSON),
    EventRoute(EventType.ORGANIZATION_DOMAIN_DELETED, "on_organization_domain_deleted", DeletedObjectJSON),
    EventRoute(EventType.ORGANIZATION_DOMAIN_UPDATED, "on_organization_domain_updated", OrganizationDomainJSON),
    EventRoute(
        EventType.ORGANIZATION_INVITATION_ACCEPTED,
        "on_organization_invitation_accepted",
        OrganizationInvitationJSON,
    ),
    EventRoute(
        EventType.ORGANIZATION_INVITATION_CREATED,
        "on_organization_invitation_created",
        OrganizationInvitationJSON,
    ),
    EventRoute(
        EventType.ORGANIZATION_INVITATION_REVOKED,
        "on_organization_invitation_revoked",
        OrganizationInvitationJSON,
    ),
    EventRoute(
        EventType.ORGANIZATION_MEMBERSHIP_CREATED,
        "on_organization_membership_created",
        OrganizationMembershipJSON,
    ),
    EventRoute(
        EventType.ORGANIZATION_MEMBERSHIP_DELETED,
        "on_organization_membership_deleted",
        DeletedObjectJSON,
    ),
    EventRoute(
        EventType.ORGANIZATION_MEMBERSHIP_UPDATED,
        "on_organization_membership_updated",
        OrganizationMembershipJSON,
    ),
    EventRoute(EventType.PERMISSION_CREATED, "on_permission_created", PermissionJSON),
    EventRoute(EventType.PERMISSION_DELETED, "on_permission_deleted", DeletedObjectJSON),
    EventRoute(EventType.PERMISSION_UPDATED, "on_permission_updated", PermissionJSON),
    EventRoute(EventType.ROLE_CREATED, "on_role_created", RoleJSON),
    EventRoute(EventType.ROLE_DELETED, "on_role_deleted", DeletedObjectJSON),
    EventRoute(EventType.ROLE_UPDATED, "on_role_updated", RoleJSON),
    EventRoute(EventType.SESSION_CREATED, "on_session_created", SessionJSON),
    EventRoute(EventType.SESSION_ENDED, "on_session_ended", SessionJSON),
    EventRoute(EventType.SESSION_PENDING, "on_session_pending", SessionJSON),
    EventRoute(EventType.SESSION_REMOVED, "on_session_removed", SessionJSON),
    EventRoute(EventType.SESSION_REVOKED, "on_session_revoked", SessionJSON),
    EventRoute(EventType.SMS_CREATED, "on_sms_created", SMSMessageJSON),
    EventRoute(EventType.USER_CREATED, "on_user_created", UserJSON),
    EventRoute(EventType.USER_CREATED_AT_EDGE, "on_user_created_at_edge", UserJSON),
    EventRoute(EventType.USER_DELETED, "on_user_deleted", DeletedObjectJSON),
    EventRoute(EventType.USER_UPDATED, "on_user_updated", UserJSON),
    EventRoute(EventType.WAITLIST_ENTRY_CREATED, "on_waitlist_entry_created", WaitlistEntryJSON),
    EventRoute(EventType.WAITLIST_ENTRY_UPDATED, "on_waitlist_entry_updated", WaitlistEntryJSON),
)

_ROUTES_BY_TYPE: dict[str, EventRoute] = {route.event_type.value: route for route in EVENT_CATALOG}


def route_for(event_type: str) -> EventRoute | None:
    """Return the catalog row for a wire event type, or None if Clerk's type is unknown here."""
    return _ROUTES_BY_TYPE.get(event_type)


def is_known_event_type(event_type: str) -> bool:
    return event_type in _ROUTES_BY_TYPE
