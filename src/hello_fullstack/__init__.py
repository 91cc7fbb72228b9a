"""hello_fullstack — a greeting Responder and the Presenter that shows it."""

__all__ = [
    "__version__",
    "GREETING",
    "Presenter",
    "create_app",
]
__version__ = "0.1.0"

from hello_fullstack.web_api.routers.greeting import GREETING  # noqa: E402, F401
from hello_fullstack.web_api.main import create_app  # noqa: E402, F401
from hello_fullstack.presenter.view import Presenter  # noqa: E402, F401
