"""Core constants: data source tables, redacted columns and custom field schema keys.

Single source of truth for the names the export and erasure flows read
and write. Table names match the ORM models in
subject_rights.infrastructure.persistence.models.
"""

# Tables read by the export flow and the erasure flow
TABLE_USERS = "users"
TABLE_USER_NOTES = "user_notes"
TABLE_USER_PROFILES = "user_profiles"
TABLE_MESSAGES = "messages"
TABLE_CONTACTS = "contact_details"
TABLE_CONTENT = "content"
TABLE_SESSION = "session"

# Credential material on the identity record; never exported
CREDENTIAL_COLUMNS = ("password", "otp_key", "otep")

# Actor-tracking columns on user notes; never exported
NOTE_ACTOR_COLUMNS = ("user_id", "created_user_id", "modified_user_id")

# Custom field contexts (schema keys)
SCHEMA_KEY_USER = "com_users.user"
SCHEMA_KEY_CONTACT = "com_contact.contact"
SCHEMA_KEY_CONTENT = "com_content.article"

# Custom field states
FIELD_STATE_PUBLISHED = 1

# Delimiter used when a multi-valued field is flattened for export
VALUE_LIST_SEPARATOR = ", "
