"""Default state key names for LangGraph integration."""

# Standard state keys used by lazyparse nodes
SOURCE_TEXT = "source_text"
SENTENCES = "sentences"

# Additional optional keys
PARSE_SUMMARY = "parse_summary"
