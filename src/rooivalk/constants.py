"""Discord platform limits and fixed names."""

DISCORD_MESSAGE_LIMIT = 2000
MAX_MESSAGE_CHAIN_LENGTH = 10

REPLY_ATTACHMENT_NAME = "rooivalk.md"
IMAGE_ATTACHMENT_NAME = "rooivalk.jpeg"

ASSISTANT_LABEL = "Rooivalk"
EXPLAIN_PROMPT = "explain the following message as context: {content}"
