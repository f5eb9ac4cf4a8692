"""Static lookup tables for tools, package managers and links."""
from typing import Dict

from .schema import PackageManager, Tool

# Detection order matters: the first lock file found wins.
LOCK_FILES: Dict[PackageManager, str] = {
    PackageManager.YARN: "yarn.lock",
    PackageManager.PNPM: "pnpm-lock.yaml",
    PackageManager.NPM: "package-lock.json",
}

TOOL_PACKAGES: Dict[Tool, str] = {
    Tool.AXE: "@axe-core/cli",
    Tool.PA11Y: "pa11y",
    Tool.LIGHTHOUSE: "@lhci/cli",
}

# `{url}` is filled with the configured base URL.
SCRIPT_TEMPLATES: Dict[Tool, str] = {
    Tool.AXE: "axe {url} --exit",
    Tool.PA11Y: "pa11y --standard WCAG2AA --timeout 30000 --wait 2000 --include-warnings {url}",
    Tool.LIGHTHOUSE: "lhci autorun",
}

TOOL_LABELS: Dict[Tool, str] = {
    Tool.AXE: "Axe",
    Tool.PA11Y: "Pa11y",
    Tool.LIGHTHOUSE: "Lighthouse",
}

RESOURCE_LINKS: Dict[Tool, str] = {
    Tool.AXE: "Axe: https://www.deque.com/axe/",
    Tool.PA11Y: "Pa11y: https://pa11y.org/",
    Tool.LIGHTHOUSE: "Lighthouse: https://developers.google.com/web/tools/lighthouse",
}
WCAG_LINK = "WCAG Guidelines: https://www.w3.org/WAI/WCAG21/quickref/"

LINT_PACKAGE = "eslint-plugin-jsx-a11y"
CONCURRENTLY_PACKAGE = "concurrently"
ESLINT_CONFIG_NAMES = ("eslint.config.js", "eslint.config.mjs", "eslint.config.cjs")
CONFIG_FILE_NAME = "a11y-wizard.yaml"
WORKFLOW_PATH = ".github/workflows/accessibility.yml"
