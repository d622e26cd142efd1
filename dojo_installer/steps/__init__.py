from .step_10_bootstrap import BootstrapStep
from .step_20_check_python import CheckPythonStep
from .step_30_download_source import DownloadSourceStep

__all__ = [
    "BootstrapStep",
    "CheckPythonStep",
    "DownloadSourceStep",
]
