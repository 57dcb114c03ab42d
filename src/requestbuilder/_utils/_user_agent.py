from importlib.metadata import PackageNotFoundError, version

from .constants import PACKAGE_NAME, USER_AGENT_PREFIX


def user_agent_value() -> str:
    try:
        package_version = version(PACKAGE_NAME)
    except PackageNotFoundError:
        package_version = "0.0.0"
    return f"{USER_AGENT_PREFIX}/{package_version}"
