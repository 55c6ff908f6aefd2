import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from loguru import logger

from azkabantool.config import AzkabanConfig
from azkabantool.errors import AlreadyExists, DirectoryNotFound, InvalidName, MissingArgument

BUNDLED_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

# (template file, output path relative to the rendered directory)
COLLECTION_TEMPLATES: List[Tuple[str, str]] = [
    ("global.properties", "global.properties"),
    ("controller.job", "controller.job"),
    ("dynamic_params.sh", "dynamic_params.sh"),
    ("final_job.job", "final_{{collection}}_job/final_{{collection}}_job.job"),
    ("final_job.properties", "final_{{collection}}_job/final_{{collection}}_job.properties"),
]

FLOW_TEMPLATES: List[Tuple[str, str]] = [
    ("hive.job", "{{flow}}_hive.job"),
    ("sqoop.job", "{{flow}}_sqoop.job"),
    ("qa.job", "{{flow}}_qa.job"),
    ("flow.properties", "{{flow}}.properties"),
]

EXECUTABLE_TEMPLATES = {"dynamic_params.sh"}


def check_name(name: Optional[str], kind: str) -> str:
    """Return the stripped name, which must be a single directory name."""
    if name is None or not name.strip():
        raise MissingArgument(f"A {kind} name is required")
    name = name.strip()
    separators = [sep for sep in (os.sep, os.altsep, "/") if sep]
    if name in (".", "..") or any(sep in name for sep in separators) or Path(name).name != name:
        raise InvalidName(f"Invalid {kind} name: {name!r}, expected a single directory name")
    return name


def substitute(text: str, values: Dict[str, str]) -> str:
    for key, value in values.items():
        text = text.replace("{{" + key + "}}", value)
    return text


class TemplateRenderer:
    """
    Render collection and flow directories from the job templates.

    Files are written to a hidden staging directory next to the target and
    renamed into place once every file is written, so a failed render never
    leaves a half-built directory behind.
    """

    def __init__(self, config: Optional[AzkabanConfig] = None):
        self.config = config or AzkabanConfig()
        if self.config.template_dir:
            self.template_dir = Path(self.config.template_dir).expanduser()
        else:
            self.template_dir = BUNDLED_TEMPLATE_DIR

    def render_collection(self, name: str, parent: str = ".") -> Path:
        name = self._check_name(name, "collection")
        target = Path(parent) / name
        self._check_not_exists(target, "Collection")

        values = {"collection": name}
        files = self._render_files("collection", COLLECTION_TEMPLATES, values)
        self._materialize(target, files)
        logger.info(f"✓ Collection created at {target}")
        return target

    def render_flow(self, name: str, parent_collection: str = ".") -> Path:
        name = self._check_name(name, "flow")
        collection_dir = Path(parent_collection)
        if not collection_dir.is_dir():
            raise DirectoryNotFound(f"Collection directory not found: {parent_collection}")
        if not (collection_dir / "controller.job").exists():
            logger.warning(f"⚠ {collection_dir.resolve()} has no controller.job, is it a collection?")

        target = collection_dir / name
        self._check_not_exists(target, "Flow")

        collection = collection_dir.resolve().name
        values = {"flow": name, "collection": collection}
        files = self._render_files("flow", FLOW_TEMPLATES, values)
        self._materialize(target, files)
        logger.info(f"✓ Flow created at {target}")
        logger.warning(
            f"Remember to add {name}_qa to the dependencies of "
            f"final_{collection}_job/final_{collection}_job.job by hand"
        )
        return target

    def _check_name(self, name: Optional[str], kind: str) -> str:
        return check_name(name, kind)

    def _check_not_exists(self, target: Path, kind: str):
        if target.exists():
            raise AlreadyExists(f"{kind} already exists: {target}")

    def _render_files(self, kind: str, templates: List[Tuple[str, str]], values: Dict[str, str]) -> Dict[str, Tuple[str, bool]]:
        source_dir = self.template_dir / kind
        if not source_dir.is_dir():
            raise DirectoryNotFound(f"Template directory not found: {source_dir}")

        files = {}
        for template_name, output_path in templates:
            template_path = source_dir / template_name
            if not template_path.exists():
                raise DirectoryNotFound(f"Template not found: {template_path}")
            content = substitute(template_path.read_text(encoding="utf-8"), values)
            files[substitute(output_path, values)] = (content, template_name in EXECUTABLE_TEMPLATES)
        return files

    def _materialize(self, target: Path, files: Dict[str, Tuple[str, bool]]):
        staging = Path(tempfile.mkdtemp(prefix=f".{target.name}.", dir=target.parent))
        try:
            for relative_path, (content, executable) in files.items():
                path = staging / relative_path
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
                if executable:
                    path.chmod(0o755)
                logger.debug(f"Rendered {target / relative_path}")
            # mkdtemp creates the directory as 0700
            staging.chmod(0o755)
            staging.rename(target)
        except Exception:
            shutil.rmtree(staging, ignore_errors=True)
            raise


def render_collection(name: str, parent: str = ".", config: Optional[AzkabanConfig] = None) -> Path:
    return TemplateRenderer(config).render_collection(name, parent)


def render_flow(name: str, parent_collection: str = ".", config: Optional[AzkabanConfig] = None) -> Path:
    return TemplateRenderer(config).render_flow(name, parent_collection)
