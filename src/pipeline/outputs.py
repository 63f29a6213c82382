"""
Output Generation

Generates Markdown and JSON reports from computed network analytics.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from src.models.entities import IntroductionPath, NetworkInsights, NetworkStatistics

logger = logging.getLogger(__name__)


class OutputGenerator:
    """Generates report files from network analytics results."""

    def __init__(
        self,
        output_dir: str | Path = "./outputs",
        formats: Optional[list[str]] = None,
        timestamp_filenames: bool = True,
        max_items_per_section: int = 20,
    ):
        """Initialize output generator.

        Args:
            output_dir: Directory for output files
            formats: List of formats to generate (markdown, json)
            timestamp_filenames: Whether to include timestamp in filenames
            max_items_per_section: Maximum items per report section
        """
        self.output_dir = Path(output_dir)
        self.formats = formats or ["markdown", "json"]
        self.timestamp_filenames = timestamp_filenames
        self.max_items_per_section = max_items_per_section

        self.output_dir.mkdir(parents=True, exist_ok=True)

    def _get_filename(self, base_name: str, extension: str) -> Path:
        """Generate output filename."""
        if self.timestamp_filenames:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"{base_name}_{timestamp}.{extension}"
        else:
            filename = f"{base_name}.{extension}"
        return self.output_dir / filename

    def _generate_insights_md(
        self,
        insights: NetworkInsights,
        statistics: NetworkStatistics,
    ) -> str:
        """Generate network insights markdown report."""
        lines = ["# Network Insights\n"]

        most_connected = statistics.most_connected_contact
        lines.extend([
            f"*Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}*\n",
            "\n## Network Overview\n",
            f"- **Total contacts**: {insights.total_contacts}",
            f"- **Connections**: {insights.total_connections}",
            f"- **Network density**: {insights.network_density:.0%}",
            f"- **Average degree**: {insights.average_degree:.2f}",
            f"- **Most connected**: {most_connected.name if most_connected else 'N/A'}\n",
            "\n### Connection Strength\n",
        ])

        for strength, count in statistics.connection_strength_distribution.items():
            lines.append(f"- **{strength}**: {count} records")

        if insights.hubs:
            lines.extend([
                "\n## Network Hubs\n",
                "| Name | Tier | Connections |",
                "|------|------|-------------|",
            ])
            for contact in insights.hubs:
                lines.append(
                    f"| {contact.name} | {contact.tier.value} | {contact.connection_count} |"
                )

        if insights.isolated_contacts:
            lines.append("\n## Isolated Contacts\n")
            for contact in insights.isolated_contacts[:self.max_items_per_section]:
                lines.append(f"- {contact.name or contact.id}")

        if insights.strongest_connections:
            lines.extend([
                "\n## Strongest Connections\n",
                "| From | To | Type | Mutual |",
                "|------|----|------|--------|",
            ])
            for edge in insights.strongest_connections:
                mutual = "Yes" if edge.bidirectional else "No"
                lines.append(f"| {edge.source} | {edge.target} | {edge.type} | {mutual} |")

        if insights.suggested_connections:
            lines.append("\n## Suggested Connections\n")
            for s in insights.suggested_connections:
                lines.append(
                    f"- **{s.contact1.name or s.contact1.id}** and "
                    f"**{s.contact2.name or s.contact2.id}**: {s.reason}"
                )

        return "\n".join(lines)

    def _generate_introductions_md(
        self,
        paths: list[IntroductionPath],
        source_name: str,
        target_name: str,
    ) -> str:
        """Generate introduction paths markdown report."""
        lines = [f"# Introduction Paths: {source_name} to {target_name}\n"]

        lines.append(f"*Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}*\n")

        if not paths:
            lines.append("\n*No introduction paths found.*\n")
            return "\n".join(lines)

        for i, intro in enumerate(paths[:self.max_items_per_section], 1):
            chain = " -> ".join(c.name or c.id for c in intro.path)
            lines.extend([
                f"\n## {i}. {chain}\n",
                f"**Steps**: {intro.total_steps}",
                f"**Strength**: {intro.strength:.0f}\n",
            ])
            for note in intro.notes:
                lines.append(f"- {note}")

        return "\n".join(lines)

    def generate_network_insights(
        self,
        insights: NetworkInsights,
        statistics: NetworkStatistics,
    ) -> dict[str, Path]:
        """Generate network insights reports.

        Returns:
            Dictionary of format -> filepath
        """
        generated = {}

        if "markdown" in self.formats:
            md_content = self._generate_insights_md(insights, statistics)
            filepath = self._get_filename("network_insights", "md")
            filepath.write_text(md_content)
            generated["markdown"] = filepath

        if "json" in self.formats:
            json_data = {
                "generated_at": datetime.now().isoformat(),
                "insights": insights.model_dump(mode="json"),
                "statistics": statistics.model_dump(mode="json"),
            }
            filepath = self._get_filename("network_insights", "json")
            filepath.write_text(json.dumps(json_data, indent=2))
            generated["json"] = filepath

        logger.info(f"Generated network insights reports: {list(generated.keys())}")
        return generated

    def generate_introduction_paths(
        self,
        paths: list[IntroductionPath],
        source_id: str,
        target_id: str,
        source_name: Optional[str] = None,
        target_name: Optional[str] = None,
    ) -> dict[str, Path]:
        """Generate introduction paths reports."""
        generated = {}

        safe_ids = "".join(c if c.isalnum() else "_" for c in f"{source_id}_{target_id}".lower())

        if "markdown" in self.formats:
            md_content = self._generate_introductions_md(
                paths, source_name or source_id, target_name or target_id
            )
            filepath = self._get_filename(f"introductions_{safe_ids}", "md")
            filepath.write_text(md_content)
            generated["markdown"] = filepath

        if "json" in self.formats:
            json_data = {
                "source_id": source_id,
                "target_id": target_id,
                "paths": [p.model_dump(mode="json") for p in paths],
            }
            filepath = self._get_filename(f"introductions_{safe_ids}", "json")
            filepath.write_text(json.dumps(json_data, indent=2))
            generated["json"] = filepath

        logger.info(f"Generated introduction path reports: {list(generated.keys())}")
        return generated


def generate_outputs(
    insights: NetworkInsights,
    statistics: NetworkStatistics,
    output_dir: str | Path = "./outputs",
    formats: Optional[list[str]] = None,
) -> dict[str, dict[str, Path]]:
    """Convenience function to generate all network reports.

    Args:
        insights: Computed network insights
        statistics: Computed network statistics
        output_dir: Output directory
        formats: Formats to generate

    Returns:
        Dictionary of report_type -> format -> filepath
    """
    generator = OutputGenerator(
        output_dir=output_dir,
        formats=formats or ["markdown", "json"],
    )

    return {
        "network_insights": generator.generate_network_insights(insights, statistics),
    }
