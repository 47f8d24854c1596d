from .allow_list import DEFAULT_TRANSLATED_SUBCOMMANDS, SubcommandAllowList
from .errors import ProcessLaunchError

__all__ = ["DEFAULT_TRANSLATED_SUBCOMMANDS", "ProcessLaunchError", "SubcommandAllowList"]
