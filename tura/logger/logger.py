import json
import os
from datetime import datetime, timezone


class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="tura_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _event(self, event, **fields):
        entry = {"event": event, "timestamp": datetime.now(timezone.utc).isoformat()}
        entry.update(fields)
        return entry

    def log(self, entry: dict):
        """Log a single entry to the run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_run_start(self, source_path, tape_path, machine, rule_count):
        self.log(self._event(
            "run_start",
            source=str(source_path),
            tape=None if tape_path is None else str(tape_path),
            rules=rule_count,
            auto_extend=machine.tape_config.extends,
            machine=machine.serialize(),
        ))

    def log_step(self, step_number, rule, machine):
        self.log(self._event("step", step=step_number, rule=str(rule), machine=machine.serialize()))

    def log_halt(self, steps, machine):
        self.log(self._event("halt", steps=steps, machine=machine.serialize()))

    def log_error(self, error):
        self.log(self._event("error", kind=type(error).__name__, message=str(error)))
