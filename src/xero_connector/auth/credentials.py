"""Platform secure storage lookup for Xero connector credentials."""

import logging
import subprocess
import sys

logger = logging.getLogger(__name__)

# Service name the secrets are filed under in every platform store
SERVICE_NAME = "xero-connector"


def _run_lookup(command: list[str], timeout: int) -> str | None:
    """Run a secret lookup command and return its trimmed output.

    Args:
        command: Command line to run
        timeout: Seconds to wait before giving up

    Returns:
        Secret value if the command succeeded with output, None otherwise
    """
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError):
        return None

    if result.returncode == 0 and result.stdout.strip():
        return result.stdout.strip()
    return None


def _get_keychain_password_macos(name: str) -> str | None:
    """Retrieve a secret from the macOS Keychain."""
    return _run_lookup(
        ["security", "find-generic-password", "-s", SERVICE_NAME, "-a", name, "-w"],
        timeout=5,
    )


def _get_password_vault_windows(name: str) -> str | None:
    """Retrieve a secret from the Windows PasswordVault via PowerShell."""
    ps_script = f'''
    try {{
        [Windows.Security.Credentials.PasswordVault,Windows.Security.Credentials,ContentType=WindowsRuntime] | Out-Null
        $vault = New-Object Windows.Security.Credentials.PasswordVault
        $cred = $vault.Retrieve("{SERVICE_NAME}", "{name}")
        $cred.RetrievePassword()
        Write-Output $cred.Password
    }} catch {{
        exit 1
    }}
    '''
    return _run_lookup(
        ["powershell", "-NoProfile", "-NonInteractive", "-Command", ps_script],
        timeout=10,
    )


def _get_secret_tool_password_linux(name: str) -> str | None:
    """Retrieve a secret through libsecret's secret-tool.

    Requires the libsecret-tools package and a running secret service
    (GNOME Keyring, KDE Wallet).
    """
    return _run_lookup(
        ["secret-tool", "lookup", "service", SERVICE_NAME, "name", name],
        timeout=5,
    )


def get_secure_credential(name: str) -> str | None:
    """Retrieve a credential from platform-specific secure storage.

    Args:
        name: Credential name (e.g., 'xero-consumer-key')

    Returns:
        Credential value if found, None otherwise
    """
    if sys.platform == "darwin":
        value = _get_keychain_password_macos(name)
    elif sys.platform == "win32":
        value = _get_password_vault_windows(name)
    elif sys.platform.startswith("linux"):
        value = _get_secret_tool_password_linux(name)
    else:
        value = None

    if value:
        logger.debug(f"Loaded {name} from secure storage")
    return value
