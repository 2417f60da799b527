import os
from dataclasses import dataclass, field

DEFAULT_LOG_LEVEL = "WARNING"
ALLOWED_SCHEMES = ("http", "https")


@dataclass
class Configuration:
    log_level: str = field(
        default_factory=lambda: os.environ.get("STABLEID_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    )
    allowed_schemes: tuple[str, ...] = field(default=ALLOWED_SCHEMES, init=False)

    def to_dict(self) -> dict:
        return {
            "log_level": self.log_level,
            "allowed_schemes": list(self.allowed_schemes),
        }
