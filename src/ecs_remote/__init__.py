import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from rich.console import Console

if TYPE_CHECKING:
    from mypy_boto3_ecs import ECSClient

from .aws_service import ECSService
from .core.app import connect
from .core.context import DEFAULT_COMMAND, ExecOptions
from .core.errors import EcsRemoteError
from .core.utils import configure_logging
from .ui import ECSNavigator

try:
    __version__ = version("ecs-remote")
except PackageNotFoundError:
    __version__ = "dev"

console = Console()

EPILOG = """Example usage:
    AWS_PROFILE=uat-admin ecs-remote -t {container-name} -p uat-admin
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecs-remote",
        description="ECS Execute Command utility for connecting to running tasks",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"ecs-remote {__version__}")
    parser.add_argument("-p", "--profile", help="AWS profile to use for authentication", type=str, default=None)
    parser.add_argument("-r", "--region", help="AWS region (defaults to the profile's region)", type=str, default=None)
    parser.add_argument("-l", "--cluster", help="Target cluster name or ARN (substring match)", type=str, default=None)
    parser.add_argument("-s", "--service", help="Target service name (exact match)", type=str, default=None)
    parser.add_argument("-t", "--container", help="Container name to execute command in", type=str, required=True)
    parser.add_argument(
        "-c", "--command", help=f"Command to run in the container (default: {DEFAULT_COMMAND})", default=DEFAULT_COMMAND
    )
    parser.add_argument("--debug", help="Show debug logging", action="store_true")
    return parser


def parse_options(argv: list[str]) -> tuple[ExecOptions, bool]:
    """Parse command line arguments into exec options and the debug flag."""
    args = _build_parser().parse_args(argv)
    options = ExecOptions(
        container=args.container,
        profile=args.profile,
        cluster=args.cluster,
        service=args.service,
        command=args.command,
        region=args.region,
    )
    return options, args.debug


def main() -> None:
    """Find a running ECS task with execute command enabled and open a shell in it."""
    options, debug = parse_options(sys.argv[1:])
    configure_logging(debug)

    try:
        ecs_client = _create_aws_client(options.profile, options.region)
        ecs_service = ECSService(ecs_client)
        navigator = ECSNavigator(ecs_service)

        connect(navigator, options)

    except EcsRemoteError as e:
        console.print(f"\n❌ Error: {e}", style="red")
        sys.exit(1)
    except (BotoCoreError, ClientError) as e:
        console.print(f"\n❌ Error: {e}", style="red")
        console.print("Make sure your AWS credentials are configured.", style="dim")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n👋 Interrupted", style="yellow")
        sys.exit(130)


def _create_aws_client(profile_name: str | None, region_name: str | None = None) -> "ECSClient":
    """Create ECS client with connection pooling and no SDK-level retries."""
    config = Config(
        max_pool_connections=5,
        retries={"total_max_attempts": 1, "mode": "standard"},
    )

    if profile_name or region_name:
        session = boto3.Session(profile_name=profile_name, region_name=region_name)
        return session.client("ecs", config=config)
    return boto3.client("ecs", config=config)


if __name__ == "__main__":
    main()
