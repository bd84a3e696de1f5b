"""Site assembler — runs every page builder in a fixed order and writes the output."""

import logging
import shutil
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Callable, Iterable

from config.settings import Settings
from config.site import OUTPUT_SUBDIRS
from exceptions.custom import OutputWriteError
from models.snapshot import SiteSnapshot
from render.environment import PageRenderer, create_environment
from builder.ancillary import build_headers, build_redirects, build_robots, build_sitemap
from builder.guides import build_guide_pages
from builder.pages import (
    RenderedPage,
    build_contact_page,
    build_home_page,
    build_hotel_page,
    build_neighborhood_page,
    build_thank_you_page,
)

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    output_dir: Path
    build_date: date
    files_written: list[str] = field(default_factory=list)
    hotel_pages: int = 0


class SiteAssembler:
    def __init__(
        self,
        snapshot: SiteSnapshot,
        settings: Settings,
        build_date: date | None = None,
    ):
        self.snapshot = snapshot
        self.settings = settings
        self.build_date = build_date or date.today()
        self.output_dir = Path(settings.output_dir)
        self.renderer = PageRenderer(
            create_environment(settings.templates_dir), settings.site_url
        )

    def steps(self) -> list[tuple[str, Callable[[], Iterable[RenderedPage]]]]:
        """Builder steps in reporting order. None depends on another's output."""
        snapshot, renderer = self.snapshot, self.renderer
        return [
            ("homepage", lambda: [build_home_page(snapshot, renderer)]),
            ("neighborhood pages", lambda: (
                build_neighborhood_page(
                    hood, snapshot.listing(hood.id), snapshot.neighborhoods, renderer
                )
                for hood in snapshot.neighborhoods
            )),
            ("hotel pages", lambda: (
                build_hotel_page(hotel, snapshot, renderer) for hotel in snapshot.hotels
            )),
            ("contact page", lambda: [
                build_contact_page(renderer, self.settings.formspree_id)
            ]),
            ("thank you page", lambda: [build_thank_you_page(renderer)]),
            ("guide pages", lambda: build_guide_pages(snapshot, renderer)),
            ("sitemap", lambda: [
                build_sitemap(snapshot, self.settings.site_url, self.build_date)
            ]),
            ("robots.txt", lambda: [build_robots(self.settings.site_url)]),
            ("_headers", lambda: [build_headers()]),
            ("_redirects", lambda: [build_redirects()]),
        ]

    def generate(self) -> BuildReport:
        logger.info("Generating Hotels of Athens site...")
        self.prepare_output()

        report = BuildReport(output_dir=self.output_dir, build_date=self.build_date)
        for name, step in self.steps():
            logger.info(f"Generating {name}...")
            for page in step():
                self.write(page)
                report.files_written.append(page.path)

        report.hotel_pages = len(self.snapshot.hotels)
        logger.info(
            f"Site generated! {report.hotel_pages} hotel pages created "
            f"({len(report.files_written)} files)."
        )
        logger.info(f"Output: {self.output_dir}")
        return report

    def prepare_output(self) -> None:
        try:
            for subdir in OUTPUT_SUBDIRS:
                (self.output_dir / subdir).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(f"cannot create output directory: {e}", path=str(self.output_dir)) from e
        self.copy_static_assets()

    def copy_static_assets(self) -> None:
        css_dir = Path(self.settings.static_dir) / "css"
        if not css_dir.is_dir():
            logger.warning(f"No stylesheets found in {css_dir}, skipping asset copy")
            return
        for stylesheet in sorted(css_dir.glob("*.css")):
            target = self.output_dir / "css" / stylesheet.name
            try:
                shutil.copyfile(stylesheet, target)
            except OSError as e:
                raise OutputWriteError(f"cannot copy stylesheet: {e}", path=str(target)) from e

    def write(self, page: RenderedPage) -> Path:
        target = self.output_dir / page.path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(page.html, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(f"cannot write file: {e}", path=str(target)) from e
        logger.debug(f"Wrote {target}")
        return target


def generate_site(
    snapshot: SiteSnapshot, settings: Settings, build_date: date | None = None
) -> BuildReport:
    return SiteAssembler(snapshot, settings, build_date).generate()
