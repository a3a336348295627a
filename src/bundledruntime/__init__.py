"""bundledruntime - minimized Java runtime images for packaged applications."""

__version__ = "0.1.0"

from bundledruntime.application.services.pipeline import RuntimePipeline  # noqa: E402
from bundledruntime.domain.model.configuration import RuntimeConfig  # noqa: E402

__all__ = ["RuntimeConfig", "RuntimePipeline", "__version__"]
