"""Shared constants for git-reconcile."""

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FATAL = 128  # Same code git uses for usage and ref errors


# Output tags, stable prefixes for every report line
TAG_CHECKOUT = "[C]"
TAG_REMOVE = "[R]"
TAG_WARNING = "[!]"
TAG_INFO = "[I]"
TAG_ERROR = "[E]"


# Rich styles per tag
TAG_STYLES = {
    TAG_CHECKOUT: "green",
    TAG_REMOVE: "red",
    TAG_WARNING: "yellow",
    TAG_INFO: "blue",
    TAG_ERROR: "bold red",
}


# Directory for the debug log file, relative to the user's home
LOG_DIR_NAME = ".git-reconcile"
LOG_FILE_NAME = "git-reconcile.log"
