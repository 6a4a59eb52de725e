"""Local browser preparation for Claude Code browser automation.

Finds the Anthropic API key, a local Chrome install and the user's
logged-in profile, and captures size-bounded CDP screenshots. Each piece
is independent; the automation layer composes them.
"""

from ccbrowser.capture import Capture, capture, take_screenshot
from ccbrowser.credentials import Credential, CredentialOrigin, async_resolve, resolve
from ccbrowser.locator import find_browser
from ccbrowser.profile import ProvisionState, chrome_user_data_dir, prepare_profile, profile_state

__all__ = [
    "Capture",
    "Credential",
    "CredentialOrigin",
    "ProvisionState",
    "async_resolve",
    "capture",
    "chrome_user_data_dir",
    "find_browser",
    "prepare_profile",
    "profile_state",
    "resolve",
    "take_screenshot",
]
