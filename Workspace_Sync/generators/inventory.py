import importlib
import json
from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from typing import Any, Callable, Dict

from Workspace_Sync.core.errors import GeneratorError, GeneratorStage
from Workspace_Sync.core.models import FileRecord, InventoryContext
from Workspace_Sync.core.paths import ROOT_PARENT


INVENTORY_FILE_NAME = "inventory.json"
INVENTORY_INDENT = 2

Generator = Callable[[Any], Any]


def load_generator(reference: str) -> Generator:
    """
    Resolve "package.module:function" to a callable.
    """
    if not isinstance(reference, str) or ":" not in reference:
        raise GeneratorError(
            GeneratorStage.INVALID_ARGUMENT,
            f"Invalid generator reference {reference!r}: expected 'module:function'",
        )

    module_name, _, attr = reference.partition(":")
    if not module_name.strip() or not attr.strip():
        raise GeneratorError(
            GeneratorStage.INVALID_ARGUMENT,
            f"Invalid generator reference {reference!r}: expected 'module:function'",
        )

    try:
        module = importlib.import_module(module_name)
    except Exception as err:
        raise GeneratorError(
            GeneratorStage.LOAD,
            f'Failed to import module "{module_name}": {err}',
        ) from err

    generator = getattr(module, attr, None)
    if not callable(generator):
        raise GeneratorError(
            GeneratorStage.MISSING_CALLABLE,
            f'Module "{module_name}" has no callable "{attr}"',
        )
    return generator


def create_inventory(
    generator: Generator,
    context: Any,
    *,
    name: str = INVENTORY_FILE_NAME,
) -> FileRecord:
    """
    Run `generator(context)` and wrap its JSON output in a root-level FileRecord.

    Every failure is a GeneratorError whose stage tells which step broke:
    bad context, missing callable, the generator raising, a result that is
    not a dict/list, or a result json cannot serialize.
    """
    from akinus.utils.logger import log

    if not callable(generator):
        raise GeneratorError(
            GeneratorStage.MISSING_CALLABLE,
            f"Generator is not callable: {type(generator).__name__}",
        )
    if not (isinstance(context, Mapping) or is_dataclass(context)) or isinstance(context, type):
        raise GeneratorError(
            GeneratorStage.INVALID_ARGUMENT,
            "Invalid context: must be a mapping or a dataclass instance",
        )

    try:
        result = generator(context)
    except Exception as err:
        raise GeneratorError(
            GeneratorStage.EXECUTION,
            f"Error running inventory generator: {err}",
        ) from err

    if not isinstance(result, (dict, list)):
        raise GeneratorError(
            GeneratorStage.INVALID_RESULT,
            f"Generator returned {type(result).__name__}, expected a dict or list",
        )

    try:
        text = json.dumps(
            result,
            indent=INVENTORY_INDENT,
            ensure_ascii=False,
            allow_nan=False,
        )
        data = text.encode("utf-8")
    except (TypeError, ValueError) as err:
        raise GeneratorError(
            GeneratorStage.SERIALIZATION,
            f"Failed to serialize inventory: {err}",
        ) from err

    log("DEBUG", "inventory", f"Generated {name} ({len(text)} chars)")

    return FileRecord(
        name=name,
        parent_path=ROOT_PARENT,
        data=data,
    )


# ============================================================
# Bundled generator
# ============================================================

def _context_parts(context):
    if is_dataclass(context):
        context = asdict(context)
    hosts = [asdict(h) if is_dataclass(h) else h for h in context.get("hosts", [])]
    docker = context.get("docker") or {}
    if is_dataclass(docker):
        docker = asdict(docker)
    return hosts, docker


def ansible_inventory(context: InventoryContext | Mapping) -> Dict[str, Any]:
    """
    Ansible JSON inventory: every host under all.hosts, docker images
    under all.vars.
    """
    hosts, docker = _context_parts(context)

    inventory_hosts = {}
    for host in hosts:
        inventory_hosts[host["name"]] = {
            "ansible_host": host["ip"],
            "ansible_user": host["username"],
            "ansible_password": host.get("password", ""),
        }

    return {
        "all": {
            "vars": {
                "docker_images": list(docker.get("images", [])),
            },
            "hosts": inventory_hosts,
        }
    }
