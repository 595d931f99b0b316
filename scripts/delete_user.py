"""
Borrado administrativo de un usuario y todos sus folders, tags y notas.

Uso:
    python -m scripts.delete_user --username bobuser
    python -m scripts.delete_user --id 333333333333333333333300 --yes
"""
import argparse
import asyncio
import logging
import sys

from app.core.config import settings
from app.core.logging import setup_logging
from app.infrastructure.db.mongo_async import close_async_db
from app.repositories import user_repo
from app.services.auth_service import delete_account

_log = logging.getLogger("noteful.scripts.delete_user")


async def _resolve_id(args: argparse.Namespace) -> str | None:
    if args.id:
        return args.id
    u = await user_repo.find_user_by_username(args.username)
    return str(u["_id"]) if u else None


async def run(args: argparse.Namespace) -> int:
    user_id = await _resolve_id(args)
    if not user_id or not await user_repo.get_user_by_id(user_id):
        _log.error("Usuario no encontrado: %s", args.id or args.username)
        return 1
    if not args.yes:
        answer = input(f"Eliminar usuario {user_id} y todos sus datos? [y/N] ")
        if answer.strip().lower() != "y":
            _log.info("Cancelado")
            return 1
    removed = await delete_account(user_id)
    _log.info("Eliminado: %s", removed)
    return 0


def main() -> int:
    ap = argparse.ArgumentParser(description="Elimina un usuario y sus recursos")
    who = ap.add_mutually_exclusive_group(required=True)
    who.add_argument("--id", help="ObjectId del usuario")
    who.add_argument("--username", help="username del usuario")
    ap.add_argument("--yes", action="store_true", help="No pedir confirmación")
    args = ap.parse_args()

    setup_logging(settings.log_level)
    try:
        return asyncio.run(run(args))
    finally:
        close_async_db()


if __name__ == "__main__":
    sys.exit(main())
