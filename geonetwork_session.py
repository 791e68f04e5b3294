#!/usr/bin/env python3
"""
Sessao autenticada no catalogo GeoNetwork.

Uso:
    python geonetwork_session.py --check
    python geonetwork_session.py --capabilities
    python geonetwork_session.py --record "uuid-do-registro"
    python geonetwork_session.py --help
"""

import argparse
import sys

from geonetwork_lib import CatalogClient, CatalogSettings, GeonetworkError, ConfigurationError
from geonetwork_lib.config import REQUIRED_KEYS
from geonetwork_lib.models import env_var_name


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Sessao autenticada no catalogo GeoNetwork (CSW)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exemplos:
  python geonetwork_session.py --check
  python geonetwork_session.py --capabilities
  python geonetwork_session.py --record "3f0e9a1c-..."
  python geonetwork_session.py --parent --logout
        """
    )

    parser.add_argument("--check", action="store_true", help="Fazer login e mostrar estado da sessao")
    parser.add_argument("--capabilities", action="store_true", help="Baixar GetCapabilities do CSW")
    parser.add_argument("--record", type=str, help="Baixar registro pelo identificador")
    parser.add_argument("--parent", action="store_true",
                        help="Baixar registro pai (csw.identifier.parent)")
    parser.add_argument("--logout", action="store_true", help="Encerrar sessao ao final")

    parser.add_argument("--log-dir", type=str, help="Diretorio para arquivos de log")
    parser.add_argument("--debug", action="store_true", help="Modo debug")

    args = parser.parse_args(argv)

    if not (args.check or args.capabilities or args.record or args.parent or args.logout):
        parser.print_help()
        return 0

    try:
        settings = CatalogSettings.from_env()
    except ConfigurationError as e:
        print(f"Configuracao incompleta: {e}")
        print("O arquivo .env deve conter:")
        for key in REQUIRED_KEYS:
            print(f"  {env_var_name(key)}=...")
        return 2

    catalogo = CatalogClient(settings, log_dir=args.log_dir, debug=args.debug)

    try:
        if args.check:
            catalogo.ensure_logged_in()
            sessao = catalogo.session
            print("\n=== SESSAO ===")
            print(f"  Catalogo: {sessao.endpoint}")
            print(f"  Estado: {sessao.state.value}")
            print(f"  Valida ate: {sessao.self_expire_at.astimezone():%Y-%m-%d %H:%M:%S}")
            for cookie in sessao.cookies():
                print(f"  - {cookie.name} ({cookie.domain})")

        if args.capabilities:
            print(catalogo.get_capabilities())

        if args.record:
            print(catalogo.get_record_by_id(args.record))

        if args.parent:
            print(catalogo.get_record_by_id())

        if args.logout:
            catalogo.logout()
            print("Sessao encerrada")
        return 0

    except GeonetworkError as e:
        print(f"Erro: {e}")
        return 1

    finally:
        catalogo.close()


if __name__ == "__main__":
    sys.exit(main())
