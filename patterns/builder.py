"""
Builder pattern for step-by-step report construction.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any, List
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class Report:
    """A three-part report; unset parts are empty strings."""
    header: str = ""
    content: str = ""
    footer: str = ""

    def describe(self) -> List[str]:
        return [
            f"Header: {self.header}",
            f"Content: {self.content}",
            f"Footer: {self.footer}",
        ]

    def display(self):
        for line in self.describe():
            print(line)


class BuildStage(IntEnum):
    """Progress of a report builder."""
    EMPTY = 0
    HEADER_SET = 1
    CONTENT_SET = 2
    FOOTER_SET = 3


class Builder(ABC):
    """Abstract builder base class."""

    @abstractmethod
    def reset(self):
        """Reset the builder."""
        pass

    @abstractmethod
    def build(self) -> Any:
        """Build and return the final product."""
        pass


class ReportBuilder(Builder):
    """
    Base class for report builders.

    Subclasses decide how each part is decorated; the order of the steps and
    the bookkeeping live here.
    """

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)
        self.reset()

    def reset(self):
        """Start a new, empty report."""
        self._report = Report()
        self._stage = BuildStage.EMPTY

    @property
    def stage(self) -> BuildStage:
        return self._stage

    @abstractmethod
    def format_header(self, header: str) -> str:
        pass

    @abstractmethod
    def format_content(self, content: str) -> str:
        pass

    @abstractmethod
    def format_footer(self, footer: str) -> str:
        pass

    def set_header(self, header: str):
        """Set the report header."""
        self._report.header = self.format_header(header)
        self._advance(BuildStage.HEADER_SET)
        return self

    def set_content(self, content: str):
        """Set the report content."""
        self._report.content = self.format_content(content)
        self._advance(BuildStage.CONTENT_SET)
        return self

    def set_footer(self, footer: str):
        """Set the report footer."""
        self._report.footer = self.format_footer(footer)
        self._advance(BuildStage.FOOTER_SET)
        return self

    def get_report(self) -> Report:
        """
        Return a copy of the report as built so far.

        Calling this before every part is set is allowed; the missing parts
        are empty strings.
        """
        if self._stage < BuildStage.FOOTER_SET:
            self.logger.warning(f"Returning incomplete report at stage {self._stage.name}")
        return replace(self._report)

    def build(self) -> Report:
        return self.get_report()

    def _advance(self, stage: BuildStage):
        self._stage = max(self._stage, stage)
        self.logger.debug(f"Report builder reached stage {stage.name}")


class TextReportBuilder(ReportBuilder):
    """Builds plain-text reports with labelled parts."""

    def format_header(self, header: str) -> str:
        return "Text Header: " + header

    def format_content(self, content: str) -> str:
        return "Text Content: " + content

    def format_footer(self, footer: str) -> str:
        return "Text Footer: " + footer


class HtmlReportBuilder(ReportBuilder):
    """Builds reports whose parts are wrapped in HTML tags."""

    def format_header(self, header: str) -> str:
        return f"<h1>{header}</h1>"

    def format_content(self, content: str) -> str:
        return f"<p>{content}</p>"

    def format_footer(self, footer: str) -> str:
        return f"<footer>{footer}</footer>"


class ReportDirector:
    """Runs any ReportBuilder through header, content and footer, in that order."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def construct_report(
        self,
        builder: ReportBuilder,
        header: str = "Report Header",
        content: str = "This is the report content.",
        footer: str = "Report Footer"
    ) -> Report:
        builder.set_header(header)
        builder.set_content(content)
        builder.set_footer(footer)
        self.logger.info(f"Constructed report with {builder.__class__.__name__}")
        return builder.get_report()
