"""macOS-only application tweaks."""

from __future__ import annotations

import sys

from airplane.logging import get_logger


def hide_dock_icon() -> bool:
    """Run as an accessory app: menu bar icon only, no Dock tile or app switcher entry.

    Must be called after the ``QApplication`` exists, since Qt sets the
    regular activation policy while starting up. Returns whether the policy
    was applied.
    """
    if sys.platform != "darwin":
        return False

    from AppKit import NSApplication, NSApplicationActivationPolicyAccessory

    applied = NSApplication.sharedApplication().setActivationPolicy_(
        NSApplicationActivationPolicyAccessory
    )
    get_logger("macos").debug(f"accessory activation policy applied: {bool(applied)}")
    return bool(applied)
