import os
import appdirs # type: ignore

config_dir : str = appdirs.user_config_dir("ResxTrans", "ResxTrans", roaming=True)

def GetConfigPath(*parts : str) -> str:
    """
    Path to a file in the user's configuration directory
    """
    return os.path.join(config_dir, *parts)
