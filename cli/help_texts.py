"""
Centralized Help Text Constants

CLI help text constants for commands and options, shared across
subcommands.
"""

from readme_check.config.environment import EnvironmentVariables


# Exit codes for different error types
class ExitCodes:
    SUCCESS = 0
    CHECKS_FAILED = 1
    INVALID_CONFIGURATION = 2


# Command help texts
VALIDATE_HELP = "Validate a README against the publication contract (headers, tables, links)."
LINKS_HELP = "List the URLs found in a README without verifying them."

# Option help texts
README_HELP = (
    "Path to the README to validate. "
    "Can also be set via the README_PATH environment variable (default: README.md)."
)

CONFIG_HELP = (
    "YAML configuration file. Values are overridden by environment variables "
    "and command line options."
)

CHECK_HELP = (
    "Run only this check. Repeat to select several: "
    "urls, headers, not_empty, resources_table, inputs_table, outputs_table."
)

MAX_WORKERS_HELP = "Maximum number of URLs verified concurrently (default: 8)."
TIMEOUT_HELP = "Per-request timeout in seconds for link verification (default: 10)."
TABLE_WINDOW_HELP = "Number of lines after a section heading searched for its table (default: 50)."
FORMAT_HELP = "Output format for the report printed to stdout."
REPORT_HELP = "Also write the JSON report to this path."
VERBOSE_HELP = "List passed assertions in human-readable output."
LOG_LEVEL_HELP = "Logging level (default: from configuration, else info)."
LOG_FILE_HELP = "Also write logs to this file (rotated at 10MB)."
REGISTRY_ONLY_HELP = "Only list registry provider URLs."


def environment_epilog() -> str:
    """Epilog listing the environment variables the configuration reads."""
    docs = EnvironmentVariables.get_variable_documentation()
    lines = ["\b", "Environment variables:"]
    lines.extend(f"  {name:<30} {doc}" for name, doc in docs.items())
    return "\n".join(lines)
