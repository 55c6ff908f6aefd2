from .render import TemplateRenderer, render_collection, render_flow
from .archive import archive, remove_archive
from .client import AzkabanClient
from .session import SessionAuthenticator
from .uploader import Uploader, upload
from .executor import Executor, execute, final_flow_name

__all__ = [
    "TemplateRenderer",
    "render_collection",
    "render_flow",
    "archive",
    "remove_archive",
    "AzkabanClient",
    "SessionAuthenticator",
    "Uploader",
    "upload",
    "Executor",
    "execute",
    "final_flow_name",
]
