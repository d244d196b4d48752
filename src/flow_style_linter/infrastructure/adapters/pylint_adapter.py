import logging
import os
import re
import subprocess
import sys

from flow_style_linter.domain.constants import DEFAULT_MSGS, PLUGIN_MODULE
from flow_style_linter.domain.entities import CheckResult, LintMessage

logger = logging.getLogger(__name__)


class PylintAdapter:
    """Runs pylint with only the flow-style checkers enabled and parses its output."""

    MSG_TEMPLATE = "{path}:{line}: {msg_id}: {msg} ({symbol})"
    # pylint exit status is a bit mask; 1 = fatal, 32 = usage error
    FATAL_STATUS_BITS = 1 | 32

    _LINE_PATTERN = re.compile(r"^(?P<path>.*?):(?P<line>\d+): (?P<code>[A-Z]\d{4}): (?P<rest>.*)$")
    _SYMBOL_PATTERN = re.compile(r"^(?P<message>.*) \((?P<symbol>[a-z0-9-]+)\)$")

    def __init__(self, codes: list[str] | None = None) -> None:
        self._codes = codes or sorted(DEFAULT_MSGS)

    def build_command(self, target_path: str) -> list[str]:
        return [
            sys.executable,
            "-m",
            "pylint",
            target_path,
            f"--load-plugins={PLUGIN_MODULE}",
            "--disable=all",
            f"--enable={','.join(self._codes)}",
            f"--msg-template={self.MSG_TEMPLATE}",
            "--score=n",
            "--reports=n",
        ]

    def gather_results(self, target_path: str) -> CheckResult:
        """Run pylint over target_path and collect flow-style messages."""
        cmd = self.build_command(target_path)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                env=os.environ.copy(),
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            return CheckResult(error=f"Could not run pylint: {exc}")

        if result.returncode & self.FATAL_STATUS_BITS:
            error = (result.stderr or result.stdout or "").strip()
            return CheckResult(error=error or f"pylint exited with status {result.returncode}")
        return CheckResult.from_messages(self.parse_output(result.stdout or ""))

    def parse_output(self, output: str) -> list[LintMessage]:
        messages: list[LintMessage] = []
        for line in output.splitlines():
            match = self._LINE_PATTERN.match(line)
            if not match:
                continue
            rest = match.group("rest")
            symbol_match = self._SYMBOL_PATTERN.match(rest)
            message, symbol = (
                (symbol_match.group("message"), symbol_match.group("symbol"))
                if symbol_match
                else (rest, "")
            )
            messages.append(
                LintMessage(
                    path=match.group("path"),
                    line=int(match.group("line")),
                    code=match.group("code"),
                    message=message,
                    symbol=symbol,
                )
            )
        return messages
