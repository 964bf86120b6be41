"""
Founder Scout: find "how I built it" videos and turn them into business reports.

A call moves through the states below and stops at the first terminal one:

    AwaitingSelections -> Confirming -> Fetching -> Done

Missing selections return the prompt, ``confirm=True`` returns only the
confirmation, and ``confirm=False`` searches and renders the reports.
"""

from typing import Any, Dict, List, Optional

from yt_insights.core.insights import compose_founder_story, select_insights
from yt_insights.core.tools.base import BaseTool
from yt_insights.models.schemas import (
    BusinessReport,
    FounderScoutArgs,
    Geography,
    KeyTopic,
    MonthlyRevenue,
)
from yt_insights.utils.error_handling import UpstreamFetchError
from yt_insights.utils.helpers import watch_url
from yt_insights.utils.logger import logging

RULE = "=" * 80


def _options(enum_cls) -> str:
    return "[" + ", ".join(f'"{member.value}"' for member in enum_cls) + "]"


def search_query(monthly_revenue: MonthlyRevenue, target_geography: Geography) -> str:
    return f"How I built a {monthly_revenue.value} business {target_geography.value}"


class FounderScoutTool(BaseTool):
    """Confirms the founder scout selections, then builds business reports."""

    async def run(self, args: FounderScoutArgs) -> str:
        if not args.has_selections():
            return render_prompt()

        confirmation = render_confirmation(args)
        if args.confirm:
            return confirmation + '\n\nRe-run with "confirm: false" to fetch and analyze videos.'

        query = search_query(args.monthly_revenue, args.target_geography)
        logging.info(f"Founder scout searching: {query}")
        search_results = await self.client.search_videos(query, args.max_results)

        reports = []
        for item in search_results:
            report = await self._build_report(item, args.monthly_revenue, args.key_topic)
            if report is not None:
                reports.append(report)

        return confirmation + "\n\n" + render_reports(reports)

    async def _build_report(
        self,
        item: Dict[str, Any],
        monthly_revenue: MonthlyRevenue,
        key_topic: KeyTopic,
    ) -> Optional[BusinessReport]:
        video_id = (item.get("id") or {}).get("videoId")
        if not video_id:
            return None

        snippet = item.get("snippet") or {}
        title = snippet.get("title") or ""
        channel_title = snippet.get("channelTitle") or ""

        try:
            transcript = await self.client.get_transcript(video_id)
        except UpstreamFetchError as e:
            logging.info(f"Using description for {video_id}: {e}")
            transcript = snippet.get("description") or ""

        entities = self.extractor.extract(title, channel_title, transcript)
        return BusinessReport(
            founder_name=entities.founder_name,
            business_name=entities.business_name,
            monthly_revenue=monthly_revenue,
            insights=select_insights(transcript, key_topic),
            founder_story=compose_founder_story(transcript),
            source=watch_url(video_id),
        )


def render_prompt() -> str:
    return "\n".join([
        "Founder Scout needs your selections. Provide the following parameters:",
        "",
        f"monthlyRevenue: one of {_options(MonthlyRevenue)}",
        f"keyTopic: one of {_options(KeyTopic)}",
        f"targetGeography: one of {_options(Geography)}",
        "",
        "Optionally include: { maxResults: number, confirm: boolean }",
    ])


def render_confirmation(args: FounderScoutArgs) -> str:
    def value(option) -> str:
        return option.value if option is not None else "(missing)"

    return "\n".join([
        "Founder Scout - Input Confirmation",
        "----------------------------------",
        f"Monthly Revenue: {value(args.monthly_revenue)}",
        f"Key Topic: {value(args.key_topic)}",
        f"Target Geography: {value(args.target_geography)}",
    ])


def render_reports(reports: List[BusinessReport]) -> str:
    if not reports:
        return "No matching videos found."

    out = "Founder Scout - Business Reports\n\n"
    out += RULE + "\n\n"
    for index, report in enumerate(reports, start=1):
        out += f"Report {index}\n"
        out += f"Founder's Name: {report.founder_name}\n"
        out += f"Business Name: {report.business_name}\n"
        out += f"Monthly Revenue: {report.monthly_revenue.value}\n"
        out += f"Source: {report.source}\n"
        out += "\nInsights:\n"
        for insight in report.insights:
            out += f"- {insight}\n"
        out += "\nFounder Story:\n"
        out += report.founder_story + "\n"
        out += RULE + "\n\n"
    return out
