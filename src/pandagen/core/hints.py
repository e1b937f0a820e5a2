"""Package-manager detection and next-step hints."""

from __future__ import annotations

from dataclasses import dataclass

from pandagen.core.contracts.result import NextStep

DEFAULT_PACKAGE_MANAGER = "npm"


@dataclass(frozen=True)
class PackageManagerInfo:
    name: str
    version: str | None = None


def pkg_from_user_agent(user_agent: str | None) -> PackageManagerInfo | None:
    """Parse ``npm_config_user_agent`` style strings (``"pnpm/8.6.0 npm/? node/v18"``)."""
    if not user_agent or not user_agent.strip():
        return None
    token = user_agent.split()[0]
    name, _, version = token.partition("/")
    if not name:
        return None
    return PackageManagerInfo(name=name, version=version or None)


def package_manager_name(user_agent: str | None) -> str:
    info = pkg_from_user_agent(user_agent)
    return info.name if info else DEFAULT_PACKAGE_MANAGER


def next_steps(package_manager: str) -> list[NextStep]:
    """Commands to suggest once the project directory is populated."""
    if package_manager == "yarn":
        return [
            NextStep(command="yarn", description="Install the dependencies 📔"),
            NextStep(command="yarn dev", description="Start the development server 🛠️"),
            NextStep(command="yarn prisma", description="Run Prisma migrations to set up your database schema 🏗️"),
            NextStep(command="yarn build", description="Bundle the app for production 📦"),
            NextStep(command="yarn start", description="Launch your application in production mode 🚀"),
        ]
    pm = package_manager
    return [
        NextStep(command=f"{pm} install", description="Install the dependencies 📔"),
        NextStep(command=f"{pm} run dev", description="Start the development server 🛠️"),
        NextStep(command=f"{pm} prisma", description="Run Prisma migrations to set up your database schema 🏗️"),
        NextStep(command=f"{pm} run build", description="Bundle the app for production 📦"),
        NextStep(command=f"{pm} start", description="Launch your application in production mode 🚀"),
    ]


__all__ = [
    "DEFAULT_PACKAGE_MANAGER",
    "PackageManagerInfo",
    "next_steps",
    "package_manager_name",
    "pkg_from_user_agent",
]
