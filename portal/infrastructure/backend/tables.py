"""Backend table and view names (schema-in-code).

The schema is owned by the hosted backend; these constants are the single
place the service names the relations it reads.
"""

TABLE_ANNOUNCEMENTS = "announcements"
TABLE_ANNOUNCEMENT_READS = "announcement_reads"
TABLE_USERS = "users"
TABLE_ROLES = "roles"
TABLE_DOCUMENTS = "documents"
TABLE_CHAT_CHANNELS = "chat_channels"
TABLE_CHAT_MESSAGES = "chat_messages"

# Reporting view exposing read_count / download_count per document.
VIEW_DOCUMENT_ANALYTICS = "document_analytics"
