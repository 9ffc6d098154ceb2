import argparse
import json
import logging
import sys

from westeros.utils.logger import setup_logging
from westeros.config_manager import ConfigManager
from westeros.store.entity_store import DataLoadError, EntityStore
from westeros.query.facade import QueryFacade

logger = logging.getLogger("Orchestrator")


def build_facade() -> QueryFacade:
    """Load the entity store named by the configuration and index it."""
    files = ConfigManager.get_data_files()
    store = EntityStore.load(files["characters"], files["houses"])
    return QueryFacade.from_store(store)


def main(argv=None) -> int:
    """CLI entrypoint for the Westeros Graph API.

    Subcommands start the GraphQL server, audit the source data for
    references that resolve to nothing, or print one character with its
    derived edges.
    """
    parser = argparse.ArgumentParser(description="Westeros Graph API")
    parser.add_argument("--config", default="cfg/config.json", help="Path to the JSON config file")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    # --- COMMAND: SERVE ---
    parser_serve = subparsers.add_parser("serve", help="Start the GraphQL server")
    parser_serve.add_argument("--host", help="Bind address (overrides config)")
    parser_serve.add_argument("--port", type=int, help="Bind port (overrides config)")

    # --- COMMAND: AUDIT ---
    parser_audit = subparsers.add_parser("audit", help="Report relation names that do not resolve")
    parser_audit.add_argument("--json", action="store_true", help="Print the full report as JSON")

    # --- COMMAND: SHOW ---
    parser_show = subparsers.add_parser("show", help="Print a character and its derived edges")
    parser_show.add_argument("name", help="Exact character name")

    args = parser.parse_args(argv)

    setup_logging(config_path=args.config)
    ConfigManager.load(args.config)

    try:
        facade = build_facade()
    except (FileNotFoundError, DataLoadError) as e:
        logger.error(f"❌ Could not load the entity store: {e}")
        return 1

    # ==========================================
    # 1. SERVER
    # ==========================================
    if args.command == "serve":
        import uvicorn
        from westeros.api.main import create_app

        server_cfg = ConfigManager.get_server_config()
        host = args.host or server_cfg.get("host", "127.0.0.1")
        port = args.port or server_cfg.get("port", 4000)

        app = create_app(
            facade,
            graphiql=server_cfg.get("graphiql", True),
            max_audit_examples=ConfigManager.get("audit", "max_examples_per_kind", default=10),
        )
        logger.info(f"🚀 Server is running on http://{host}:{port}/graphql")
        uvicorn.run(app, host=host, port=port, log_config=None)

    # ==========================================
    # 2. REFERENCE AUDIT
    # ==========================================
    elif args.command == "audit":
        max_examples = ConfigManager.get("audit", "max_examples_per_kind", default=10)
        audit = facade.audit(max_examples_per_kind=max_examples)
        audit.log_summary()
        if args.json:
            print(json.dumps(audit.to_dict(), indent=2, ensure_ascii=False))

    # ==========================================
    # 3. SHOW ONE CHARACTER
    # ==========================================
    elif args.command == "show":
        character = facade.get_character(args.name)
        if character is None:
            logger.warning(f"⚠️ No character named {args.name!r}")
            return 1

        house = facade.house_of(character)
        print(json.dumps({
            "id": character.id,
            "name": character.name,
            "slug": character.slug,
            "house": house.name if house else None,
            "siblings": [c.name for c in facade.siblings(character)],
            "spouses": [c.name for c in facade.spouses(character)],
            "lovers": [c.name for c in facade.lovers(character)],
        }, indent=2, ensure_ascii=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
