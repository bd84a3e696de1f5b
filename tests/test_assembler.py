"""End-to-end tests for the site assembler."""

from datetime import date

import pytest

from builder.assembler import SiteAssembler, generate_site
from config.settings import Settings
from exceptions.custom import OutputWriteError

from conftest import (
    BUILD_DATE,
    STATIC_DIR,
    TEMPLATES_DIR,
    make_hotel,
    make_neighborhood,
    make_snapshot,
)


def read_tree(root):
    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


class TestPlakaScenario:
    @pytest.fixture
    def snapshot(self):
        hood = make_neighborhood("plaka", name="Plaka")
        hotel = make_hotel(
            "Electra Palace", "plaka", star_rating=5, price_per_night=280,
            has_acropolis_view=True,
        )
        return make_snapshot([hood], [hotel])

    def test_home_lists_neighborhood_and_view_hotel(self, snapshot, settings):
        generate_site(snapshot, settings, build_date=BUILD_DATE)
        home = (settings.output_dir / "index.html").read_text(encoding="utf-8")
        grid = home.split("Browse by Neighborhood")[1].split("</section>")[0]
        assert 'href="/athens-hotels/plaka"' in grid
        view_section = home.split("Hotels with Acropolis Views")[1].split("</section>")[0]
        assert 'href="/hotel/electra-palace-athens"' in view_section

    def test_hotel_page_shows_price(self, snapshot, settings):
        generate_site(snapshot, settings, build_date=BUILD_DATE)
        page = settings.output_dir / "hotel" / "electra-palace-athens.html"
        assert page.exists()
        assert "€280" in page.read_text(encoding="utf-8")


class TestSiteAssembler:
    def test_writes_every_artifact(self, athens_snapshot, settings):
        report = generate_site(athens_snapshot, settings, build_date=BUILD_DATE)
        out = settings.output_dir
        expected = [
            "index.html",
            "athens-hotels/plaka.html",
            "athens-hotels/koukaki.html",
            "athens-hotels/psyrri.html",
            "hotel/marble-house-athens.html",
            "contact.html",
            "thank-you.html",
            "budget-hotels-athens.html",
            "luxury-hotels-athens.html",
            "best-rooftop-bars-athens.html",
            "sitemap.xml",
            "robots.txt",
            "_headers",
            "_redirects",
            "css/style.css",
        ]
        for path in expected:
            assert (out / path).is_file(), path
        assert (out / "images").is_dir()
        assert report.hotel_pages == 8
        # 1 home + 3 neighborhoods + 8 hotels + contact + thank-you + 3 guides + 4 ancillary
        assert len(report.files_written) == 21

    def test_report_order(self, athens_snapshot, settings):
        report = generate_site(athens_snapshot, settings, build_date=BUILD_DATE)
        files = report.files_written
        assert files[0] == "index.html"
        assert files[-4:] == ["sitemap.xml", "robots.txt", "_headers", "_redirects"]
        assert files.index("contact.html") < files.index("budget-hotels-athens.html")

    def test_idempotent(self, athens_snapshot, settings):
        generate_site(athens_snapshot, settings, build_date=BUILD_DATE)
        first = read_tree(settings.output_dir)
        generate_site(athens_snapshot, settings, build_date=BUILD_DATE)
        assert read_tree(settings.output_dir) == first

    def test_uses_formspree_setting(self, athens_snapshot, settings):
        generate_site(athens_snapshot, settings, build_date=BUILD_DATE)
        contact = (settings.output_dir / "contact.html").read_text(encoding="utf-8")
        assert "https://formspree.io/f/testform" in contact

    def test_sitemap_date(self, athens_snapshot, settings):
        generate_site(athens_snapshot, settings, build_date=date(2026, 10, 19))
        sitemap = (settings.output_dir / "sitemap.xml").read_text(encoding="utf-8")
        assert "<lastmod>2026-10-19</lastmod>" in sitemap

    def test_unwritable_output(self, athens_snapshot, settings, tmp_path):
        blocker = tmp_path / "blocked"
        blocker.write_text("not a directory")
        settings.output_dir = blocker
        with pytest.raises(OutputWriteError):
            SiteAssembler(athens_snapshot, settings, BUILD_DATE).generate()


class TestContactForm:
    def test_blank_formspree_id_uses_default(self, athens_snapshot, tmp_path, monkeypatch):
        monkeypatch.setenv("FORMSPREE_ID", "")
        settings = Settings(
            _env_file=None,
            templates_dir=TEMPLATES_DIR,
            static_dir=STATIC_DIR,
            output_dir=tmp_path / "dist",
        )
        assert settings.formspree_id == "xnjzokwn"

        generate_site(athens_snapshot, settings, build_date=BUILD_DATE)
        contact = (settings.output_dir / "contact.html").read_text(encoding="utf-8")
        assert 'action="https://formspree.io/f/xnjzokwn"' in contact

    def test_formspree_id_from_environment(self, monkeypatch):
        monkeypatch.setenv("FORMSPREE_ID", "abc123")
        assert Settings(_env_file=None).formspree_id == "abc123"
