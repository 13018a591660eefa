from importlib.metadata import PackageNotFoundError, version


def user_agent_value() -> str:
    try:
        package_version = version("hatstall")
    except PackageNotFoundError:
        package_version = "unknown"
    return f"Hatstall.Python/{package_version}"
