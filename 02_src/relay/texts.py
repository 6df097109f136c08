"""User- and admin-facing message texts."""

WELCOME = (
    "🤖 Hello!\n\n"
    "Your questions are received by our support team and will be answered "
    "shortly. Please write your message!"
)

NEW_CONVERSATION = "👤 New client: {name} (ID: {chat_id})\n📝 Conversation started!"

RELAY_HEADER = "👤 {name} (ID: {chat_id}):\n"
RELAY_TEXT = "📝 {text}"
RELAY_PHOTO = "🖼️ User sent a picture"
RELAY_VIDEO = "🎥 User sent a video"
RELAY_DOCUMENT = "📄 User sent a document"
RELAY_OTHER = "📎 Other type of message"

REPLY_PREFIX = "📩 "

UNKNOWN_RECIPIENT = "⚠️ This message cannot be delivered to a user."

SENT_TEXT = "✅ Message sent!"
SENT_PHOTO = "✅ Photo sent!"
SENT_VIDEO = "✅ Video sent!"
SENT_DOCUMENT = "✅ Document sent!"
SENT_LOCATION = "✅ Location sent!"

INVALID_PHOTO = "⚠️ Invalid photo URL! Correct format: photo <URL> [caption]"
INVALID_VIDEO = "⚠️ Invalid video URL! Correct format: video <URL> [caption]"
INVALID_DOCUMENT = "⚠️ Invalid document URL! Correct format: doc <URL> [caption]"
INVALID_LOCATION = (
    "⚠️ Invalid location coordinates! "
    "Correct format: location <latitude> <longitude>"
)

QUEUE_FULL = "⚠️ System is busy, please try again later!"
DELIVERY_FAILED = "⚠️ Error sending {kind}: {error}"
UNEXPECTED_ERROR = "⚠️ An error occurred: {error}"
