"""TypedDicts describing Clerk webhook payload shapes.

These are static descriptions of the JSON Clerk sends in ``data``. Handlers
receive the decoded dict untouched; nothing here validates at runtime, and
Clerk may add keys at any time.
"""

from typing import Any, TypedDict


class EmailAddressJSON(TypedDict, total=False):
    object: str
    id: str
    email_address: str
    verification: dict[str, Any] | None
    linked_to: list[dict[str, Any]]


class PhoneNumberJSON(TypedDict, total=False):
    object: str
    id: str
    phone_number: str
    reserved_for_second_factor: bool
    default_second_factor: bool
    verification: dict[str, Any] | None
    linked_to: list[dict[str, Any]]


class UserJSON(TypedDict, total=False):
    object: str
    id: str
    username: str | None
    first_name: str | None
    last_name: str | None
    image_url: str
    has_image: bool
    primary_email_address_id: str | None
    primary_phone_number_id: str | None
    primary_web3_wallet_id: str | None
    email_addresses: list[EmailAddressJSON]
    phone_numbers: list[PhoneNumberJSON]
    web3_wallets: list[dict[str, Any]]
    external_accounts: list[dict[str, Any]]
    external_id: str | None
    password_enabled: bool
    two_factor_enabled: bool
    banned: bool
    locked: bool
    public_metadata: dict[str, Any]
    private_metadata: dict[str, Any]
    unsafe_metadata: dict[str, Any]
    last_sign_in_at: int | None
    created_at: int
    updated_at: int


class DeletedObjectJSON(TypedDict, total=False):
    object: str
    id: str
    slug: str
    deleted: bool


class SessionJSON(TypedDict, total=False):
    object: str
    id: str
    client_id: str
    user_id: str
    status: str
    last_active_at: int
    last_active_organization_id: str | None
    actor: dict[str, Any] | None
    expire_at: int
    abandon_at: int
    created_at: int
    updated_at: int


class OrganizationJSON(TypedDict, total=False):
    object: str
    id: str
    name: str
    slug: str
    image_url: str
    has_image: bool
    max_allowed_memberships: int
    admin_delete_enabled: bool
    members_count: int
    created_by: str
    public_metadata: dict[str, Any]
    private_metadata: dict[str, Any]
    created_at: int
    updated_at: int


class OrganizationMembershipJSON(TypedDict, total=False):
    object: str
    id: str
    role: str
    permissions: list[str]
    organization: OrganizationJSON
    public_user_data: dict[str, Any]
    public_metadata: dict[str, Any]
    private_metadata: dict[str, Any]
    created_at: int
    updated_at: int


class OrganizationInvitationJSON(TypedDict, total=False):
    object: str
    id: str
    email_address: str
    organization_id: str
    role: str
    status: str
    public_metadata: dict[str, Any]
    private_metadata: dict[str, Any]
    created_at: int
    updated_at: int


class OrganizationDomainJSON(TypedDict, total=False):
    object: str
    id: str
    name: str
    organization_id: str
    enrollment_mode: str
    verification: dict[str, Any] | None
    affiliation_email_address: str | None
    total_pending_invitations: int
    total_pending_suggestions: int
    created_at: int
    updated_at: int


class EmailJSON(TypedDict, total=False):
    object: str
    id: str
    slug: str | None
    from_email_name: str
    to_email_address: str
    email_address_id: str | None
    user_id: str | None
    subject: str
    body: str
    body_plain: str | None
    status: str
    data: dict[str, Any] | None
    delivered_by_clerk: bool


class SMSMessageJSON(TypedDict, total=False):
    object: str
    id: str
    slug: str | None
    from_phone_number: str
    to_phone_number: str
    phone_number_id: str | None
    user_id: str | None
    message: str
    status: str
    data: dict[str, Any] | None
    delivered_by_clerk: bool


class PermissionJSON(TypedDict, total=False):
    object: str
    id: str
    key: str
    name: str
    description: str
    created_at: int
    updated_at: int


class RoleJSON(TypedDict, total=False):
    object: str
    id: str
    key: str
    name: str
    description: str
    permissions: list[PermissionJSON]
    is_creator_eligible: bool
    created_at: int
    updated_at: int


class WaitlistEntryJSON(TypedDict, total=False):
    object: str
    id: str
    email_address: str
    status: str
    invitation: dict[str, Any] | None
    is_locked: bool
    created_at: int
    updated_at: int
