"""GitHub Actions workflow generation for the selected accessibility tools."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

import orjson
from jinja2 import StrictUndefined, Template

from .constants import LOCK_FILES, WORKFLOW_PATH
from .package_manager import ci_install_command, run_command_prefix
from .project import write_file
from .schema import PackageManager, Tool, WizardSettings, ordered_tools

JOBS: Dict[Tool, Dict[str, str]] = {
    Tool.AXE: {
        "id": "axe-core",
        "var": "axe",
        "label": "Axe Core",
        "artifact": "axe-accessibility-results",
        "passed": "All accessibility tests passed",
        "failed": "Accessibility issues found",
        "failed_icon": "❌",
    },
    Tool.PA11Y: {
        "id": "pa11y",
        "var": "pa11y",
        "label": "Pa11y",
        "artifact": "pa11y-accessibility-results",
        "passed": "No accessibility violations detected",
        "failed": "Accessibility violations found",
        "failed_icon": "❌",
    },
    Tool.LIGHTHOUSE: {
        "id": "lighthouse",
        "var": "lighthouse",
        "label": "Lighthouse",
        "artifact": "lighthouse-results",
        "passed": "Performance and accessibility scores met thresholds",
        "failed": "Performance or accessibility scores below threshold",
        "failed_icon": "⚠️",
    },
}

# GitHub expressions use {{ }}, so template variables are written [[ ]].
TEMPLATE = """\
{% macro setup_node() %}
      - uses: actions/checkout@v4
{% if pnpm %}
      - uses: pnpm/action-setup@v4
        with:
          version: 9
{% endif %}
      - uses: actions/setup-node@v4
        with:
          node-version: [[ node_version ]]
          cache: "[[ pm ]]"
{%- endmacro %}
{% macro restore_caches() %}
      - name: Restore dependencies
        uses: actions/cache@v4
        with:
          path: node_modules
          key: ${{ needs.setup.outputs.cache-key }}

      - name: Restore build output
        uses: actions/cache@v4
        with:
          path: dist
          key: ${{ runner.os }}-build-${{ github.sha }}
{%- endmacro %}
{% macro start_server() %}
      - name: Start preview server
        run: |
          [[ preview_cmd ]] &
          npx wait-on [[ base_url ]] --timeout 60000
{%- endmacro %}
{% macro upload(job, path) %}
      - name: Upload [[ job.label ]] results
        uses: actions/upload-artifact@v4
        if: always()
        with:
          name: [[ job.artifact ]]
          path: [[ path ]]
{%- endmacro %}
name: Accessibility Testing

on:
  push:
    branches: [[ branches ]]
  pull_request:
    branches: [[ branches ]]

env:
  TEST_BASE_URL: [[ base_url ]]
  TEST_PAGES: "/"

jobs:
  setup:
    name: Setup and build
    runs-on: ubuntu-latest
    outputs:
      cache-key: ${{ steps.cache-key.outputs.key }}
    steps:
[[ setup_node() ]]

      - name: Generate cache key
        id: cache-key
        run: echo "key=${{ runner.os }}-a11y-node[[ node_version ]]-${{ hashFiles('[[ lock_file ]]') }}" >> $GITHUB_OUTPUT

      - name: Cache dependencies
        uses: actions/cache@v4
        with:
          path: node_modules
          key: ${{ steps.cache-key.outputs.key }}
          restore-keys: |
            ${{ runner.os }}-a11y-node[[ node_version ]]-

      - name: Install dependencies
        run: [[ install_cmd ]]

      - name: Build site
        run: [[ build_cmd ]]

      - name: Cache build output
        uses: actions/cache@v4
        with:
          path: dist
          key: ${{ runner.os }}-build-${{ github.sha }}
{% if axe %}

  axe-core:
    name: Axe Core Accessibility Testing
    runs-on: ubuntu-latest
    needs: setup
    steps:
[[ setup_node() ]]

[[ restore_caches() ]]

[[ start_server() ]]

      - name: Install Axe CLI and browser drivers
        run: |
          npm install -g @axe-core/cli
          npx browser-driver-manager install chrome

      - name: Run Axe accessibility tests
        run: |
          mkdir -p axe-results
          axe [[ base_url ]] --save axe-results/axe-results.json --tags wcag2a,wcag2aa,wcag21aa --exit

[[ upload(axe, "axe-results/") ]]
{% endif %}
{% if pa11y %}

  pa11y:
    name: Pa11y Accessibility Testing
    runs-on: ubuntu-latest
    needs: setup
    steps:
[[ setup_node() ]]

[[ restore_caches() ]]

      - name: Install Pa11y
        run: npm install -g pa11y

[[ start_server() ]]

      - name: Run Pa11y accessibility tests
        env:
          PUPPETEER_EXECUTABLE_PATH: /usr/bin/google-chrome-stable
        run: |
          mkdir -p pa11y-results
          export PUPPETEER_LAUNCH_ARGS="--no-sandbox --disable-setuid-sandbox --disable-dev-shm-usage --disable-gpu --headless"
          pa11y [[ base_url ]] --reporter json > pa11y-results/pa11y-results.json || true
          pa11y [[ base_url ]] --reporter cli

[[ upload(pa11y, "pa11y-results/") ]]
{% endif %}
{% if lighthouse %}

  lighthouse:
    name: Lighthouse Accessibility & Performance
    runs-on: ubuntu-latest
    needs: setup
    steps:
[[ setup_node() ]]

[[ restore_caches() ]]

      - name: Install Lighthouse CI
        run: npm install -g @lhci/cli

[[ start_server() ]]

      - name: Run Lighthouse CI
        run: lhci autorun

      - name: Collect Lighthouse artifacts
        if: always()
        run: |
          mkdir -p lighthouse-results
          if [ -d ".lighthouseci" ]; then
            cp -r .lighthouseci/* lighthouse-results/ 2>/dev/null || true
          fi
          if [ -d "lhci_reports" ]; then
            cp -r lhci_reports/* lighthouse-results/ 2>/dev/null || true
          fi

[[ upload(lighthouse, "lighthouse-results/") ]]
{% endif %}

  accessibility-comment:
    name: Accessibility Test Summary Comment
    runs-on: ubuntu-latest
    needs: [[ needs ]]
    if: always() && github.event_name == 'pull_request'
    permissions:
      contents: read
      pull-requests: write
    steps:
      - uses: actions/checkout@v4

      - name: Download all artifacts
        uses: actions/download-artifact@v4

      - name: Create accessibility summary comment
        uses: actions/github-script@v7
        with:
          github-token: ${{ secrets.GITHUB_TOKEN }}
          script: |
            // Find and delete any existing accessibility comments
            const comments = await github.rest.issues.listComments({
              issue_number: context.issue.number,
              owner: context.repo.owner,
              repo: context.repo.repo,
            });

            const accessibilityComments = comments.data.filter(comment =>
              comment.body.includes('🔍 Accessibility Test Results') &&
              comment.body.includes('🤖 This comment was automatically generated')
            );

            for (const comment of accessibilityComments) {
              try {
                await github.rest.issues.deleteComment({
                  owner: context.repo.owner,
                  repo: context.repo.repo,
                  comment_id: comment.id,
                });
              } catch (error) {
                console.log(`Could not delete comment ${comment.id}: ${error.message}`);
              }
            }

            function getStatusDisplay(result) {
              switch(result) {
                case 'success': return { emoji: '✅', text: 'Passed' };
                case 'failure': return { emoji: '❌', text: 'Failed' };
                case 'cancelled': return { emoji: '⏭️', text: 'Cancelled' };
                case 'skipped': return { emoji: '⚪', text: 'Skipped' };
                default: return { emoji: '❓', text: 'Unknown' };
              }
            }

            // Get job results
{% for job in jobs %}
            const [[ job.var ]]Status = getStatusDisplay('${{ needs.[[ job.id ]].result }}');
{% endfor %}

            const comment = `## 🔍 Accessibility Test Results

            | Tool | Status | Result |
            |------|--------|--------|
{% for job in jobs %}
            | **[[ job.label ]]** | ${[[ job.var ]]Status.emoji} | ${[[ job.var ]]Status.text} |
{% endfor %}

            Download detailed results from the **Artifacts** section of this workflow run.

            ---
            <sub>🤖 This comment was automatically generated by the accessibility testing workflow</sub>`;

            await github.rest.issues.createComment({
              issue_number: context.issue.number,
              owner: context.repo.owner,
              repo: context.repo.repo,
              body: comment
            });

  accessibility-summary:
    name: Accessibility Test Summary
    runs-on: ubuntu-latest
    needs: [[ needs ]]
    if: always()
    steps:
      - name: Download all artifacts
        uses: actions/download-artifact@v4

      - name: Create accessibility summary
        run: |
          echo "# 🔍 Accessibility Test Results" >> $GITHUB_STEP_SUMMARY
          echo "" >> $GITHUB_STEP_SUMMARY
{% for job in jobs %}
          if [ "${{ needs.[[ job.id ]].result }}" = "success" ]; then
            echo "✅ **[[ job.label ]]**: [[ job.passed ]]" >> $GITHUB_STEP_SUMMARY
          else
            echo "[[ job.failed_icon ]] **[[ job.label ]]**: [[ job.failed ]]" >> $GITHUB_STEP_SUMMARY
          fi
{% endfor %}
          echo "" >> $GITHUB_STEP_SUMMARY
          echo "📊 **Test artifacts are available for download in the workflow run**" >> $GITHUB_STEP_SUMMARY
"""

_TEMPLATE = Template(
    TEMPLATE,
    variable_start_string="[[",
    variable_end_string="]]",
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


def _flow_list(items: Iterable[str]) -> str:
    return "[" + ", ".join(items) + "]"


def _quoted_list(items: Iterable[str]) -> str:
    # JSON strings are valid YAML scalars; globs like `**` are not plain scalars
    return _flow_list(orjson.dumps(item).decode() for item in items)


def job_ids(tools: Iterable[Tool]) -> List[str]:
    """Workflow job ids for ``tools`` in canonical order."""
    return [JOBS[t]["id"] for t in ordered_tools(tools)]


def generate_workflow_content(
    tools: Iterable[Tool],
    package_manager: PackageManager = PackageManager.YARN,
    settings: WizardSettings = None,
) -> str:
    """Render the workflow YAML; only the selected tools get jobs and summary lines."""
    selected = ordered_tools(tools)
    if not selected:
        raise ValueError("At least one accessibility tool is required to generate a workflow")
    settings = settings or WizardSettings()
    pm = PackageManager(package_manager)
    prefix = run_command_prefix(pm)
    preview_cmd = (
        f"npm run preview -- --port {settings.port}"
        if pm is PackageManager.NPM
        else f"{pm.value} preview --port {settings.port}"
    )
    return _TEMPLATE.render(
        axe=JOBS[Tool.AXE] if Tool.AXE in selected else None,
        pa11y=JOBS[Tool.PA11Y] if Tool.PA11Y in selected else None,
        lighthouse=JOBS[Tool.LIGHTHOUSE] if Tool.LIGHTHOUSE in selected else None,
        jobs=[JOBS[t] for t in selected],
        needs=_flow_list(job_ids(selected)),
        branches=_quoted_list(settings.branches),
        base_url=settings.base_url,
        node_version=settings.node_version,
        pm=pm.value,
        pnpm=pm is PackageManager.PNPM,
        lock_file=LOCK_FILES[pm],
        install_cmd=ci_install_command(pm),
        build_cmd=f"{prefix} build",
        preview_cmd=preview_cmd,
    )


def generate_ci_workflow(
    tools: Iterable[Tool],
    package_manager: PackageManager,
    project_dir: Path = Path("."),
    settings: WizardSettings = None,
) -> Path:
    """Write .github/workflows/accessibility.yml and return its path."""
    content = generate_workflow_content(tools, package_manager, settings)
    return write_file(Path(project_dir) / WORKFLOW_PATH, content)
