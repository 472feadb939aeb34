"""Fixed prompt texts added to user requests."""

# Default instructions used when the user uploads files without a prompt
IMAGE_ANALYSIS_PROMPT: str = (
    "Please analyze this image and describe what you see in detail."
)

TEXT_SUMMARY_PROMPT: str = "Please summarize the content of this file."

# Inline text attachment, followed by the decoded file content
TEXT_FILE_TEMPLATE: str = 'Content of file "{name}":\n{content}'

# Stand-in for documents we accept but cannot embed
DOCUMENT_PLACEHOLDER_TEMPLATE: str = (
    'I received a {kind} document named "{name}". '
    "For better analysis, please convert this document to plain text "
    "or paste the content directly."
)

# Connectivity self-test
MODEL_TEST_PROMPT: str = "Respond exactly with: Gemini AI is working correctly!"
