class ProviderEndpoints:
    QUERY = "/query"

class ChatEndpoints:
    CHANNEL_MESSAGES = "/channels/{channel_id}/messages"

class ServiceEndpoints:
    MESSAGES = "/messages"
    HEALTH = "/health"
