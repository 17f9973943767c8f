import importlib
import logging
import pkgutil

logger = logging.getLogger("tools.loader")


def load_tools():
    """
    Auto-discover tool modules inside tools/ package.
    Each tool module must expose:
      - TOOL_NAME (str)
      - TOOL_SPEC (dict)  (MCP-style tool descriptor: name, description, inputSchema, annotations)
      - run(api: ProlificAPI, args: dict) -> Any
    Modules are visited in name order, so the tool list is stable.
    """
    package_name = __name__.rsplit(".", 1)[0]  # "tools"
    package = importlib.import_module(package_name)

    runners = {}
    specs = {}

    for mod in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        name = mod.name
        if name == "loader" or name.startswith("_"):
            continue

        m = importlib.import_module(f"{package_name}.{name}")

        tool_name = getattr(m, "TOOL_NAME", None)
        tool_spec = getattr(m, "TOOL_SPEC", None)
        runner = getattr(m, "run", None)

        if not tool_name or not tool_spec or not callable(runner):
            logger.debug(f"Skipping {package_name}.{name}: not a tool module")
            continue
        if tool_name in runners:
            raise RuntimeError(f"Duplicate tool name {tool_name} in {package_name}.{name}")

        runners[tool_name] = runner
        specs[tool_name] = tool_spec

    return runners, specs
