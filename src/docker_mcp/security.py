"""Container identifier validation and audit logging."""

import re
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union


class ValidationError(Exception):
    """Raised when input validation fails."""
    pass


class SecurityValidator:
    """Validates caller-supplied identifiers before they reach the docker CLI."""

    # Patterns that would change meaning if the value ever reached a shell
    DANGEROUS_PATTERNS = [
        (r'\$\(', 'command substitution: $(...)'),
        (r'`', 'backticks (command execution)'),
        (r'\$\{', 'variable expansion: ${...}'),
        (r'&&', 'command chaining: &&'),
        (r'\|\|', 'command chaining: ||'),
        (r'\|', 'pipe: |'),
        (r'&', 'background operator: &'),
        (r';', 'command separator: ;'),
        (r'[<>]', 'redirection: < or >'),
        (r'\s', 'whitespace'),
        (r'\n', 'newline character'),
        (r'\r', 'carriage return'),
    ]

    # Docker names and (short or full) IDs
    CONTAINER_PATTERN = re.compile(r'^[a-zA-Z0-9][a-zA-Z0-9_.-]*$')
    MAX_CONTAINER_LENGTH = 255

    @staticmethod
    def detect_dangerous_patterns(value: str) -> List[str]:
        """
        Scan a value for shell metacharacters.

        Args:
            value: Value to scan

        Returns:
            List of detected pattern descriptions (empty if clean)
        """
        warnings = []
        for pattern, description in SecurityValidator.DANGEROUS_PATTERNS:
            if re.search(pattern, value):
                warnings.append(description)
        return warnings

    @staticmethod
    def validate_container(name: str) -> None:
        """
        Validate a container name or ID.

        Args:
            name: Container name or ID (already trimmed)

        Raises:
            ValidationError if the identifier is invalid
        """
        if not name:
            raise ValidationError("Container name cannot be empty")

        if len(name) > SecurityValidator.MAX_CONTAINER_LENGTH:
            raise ValidationError(
                f"Container name too long (max {SecurityValidator.MAX_CONTAINER_LENGTH} characters)"
            )

        warnings = SecurityValidator.detect_dangerous_patterns(name)
        if warnings:
            raise ValidationError(
                "Container name contains forbidden characters ({}). "
                "This prevents command injection.".format(", ".join(warnings))
            )

        if not SecurityValidator.CONTAINER_PATTERN.match(name):
            raise ValidationError(
                "Container name must start with a letter or digit and contain only "
                "letters, numbers, underscore, period, and dash"
            )


class AuditLogger:
    """Audit logging for destructive Docker operations."""

    def __init__(self, log_path: Optional[Union[str, Path]] = None):
        """
        Initialize audit logger.

        Args:
            log_path: Path to audit log file (default: ~/.docker-mcp-audit.log)
        """
        if log_path is None:
            self.log_path = Path.home() / ".docker-mcp-audit.log"
        else:
            self.log_path = Path(log_path)

    def log(self, action: str, container: str, details: str, user: str = "mcp-server"):
        """
        Write audit log entry.

        Args:
            action: Outcome of the operation (SUCCESS, FAILED)
            container: Target container name or ID
            details: Additional details
            user: User/source of the action
        """
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        details = details.replace("\n", " ").strip()
        log_entry = "[{0}] USER={1} ACTION={2} CONTAINER={3} DETAILS={4}\n".format(
            timestamp, user, action, container, details
        )

        try:
            with open(self.log_path, "a") as f:
                f.write(log_entry)
        except OSError as e:
            print(f"Warning: Could not write to audit log: {e}", file=sys.stderr)
