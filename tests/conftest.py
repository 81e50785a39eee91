# ABOUTME: Shared page fixtures for parsing, service and CLI tests
# ABOUTME: Built from the wiki_html helpers

import pytest
from wiki_html import country_heading, operator_table, row, section_heading, wiki_page


@pytest.fixture
def testland_page() -> str:
    """Region-style page with one national section and one country."""
    return wiki_page(
        "<p>Intro paragraph.</p>",
        section_heading("National operators"),
        country_heading("Testland – TL"),
        operator_table(
            row("310", "001", "Acme", "Acme Wireless", "operational", "GSM", "note [1]"),
        ),
        section_heading("See also"),
        "<ul><li>Other list</li></ul>",
    )


@pytest.fixture
def global_page() -> str:
    """Overview-style page with a national table and an international one."""
    return wiki_page(
        section_heading("National operators"),
        country_heading("Testland – TL"),
        operator_table(row("310", "002", "Dup", "Duplicate Co", "Operational", "LTE", "")),
        section_heading("International operators"),
        operator_table(
            row("901", "01", "", "ICO Satellite Management", "Not opearational", "Satellite", ""),
        ),
    )
