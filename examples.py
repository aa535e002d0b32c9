"""Showcase examples for timelineplot README."""

from timelineplot import milestone, timeline


def hero_example():
    """Hero example: the default S-curve with wrapped, de-collided labels."""
    with timeline(
            filename="docs/hero",
            title="Key Milestones",
            subtitle="From garage to global",
            png=True,
    ):
        milestone("2015", "Company founded in a garage")
        milestone("2016", "First prototype")
        milestone("2018", "Launch of the flagship product")
        milestone("2019", "Series A funding")
        milestone("2021", "Expansion into Europe and Asia")
        milestone("2023", "One million customers")


def example_zigzag():
    """Zig-zag baseline: callouts alternate above and below the track."""
    with timeline(
            filename="docs/example_zigzag",
            title="Product History",
            preset="zigzag",
    ):
        for year, title in [
            ("2010", "Idea"),
            ("2011", "Prototype built on weekends"),
            ("2012", "Beta with twenty pilot customers"),
            ("2014", "General availability"),
            ("2016", "Mobile apps"),
            ("2018", "Enterprise edition with single sign-on and audit logs"),
            ("2020", "Remote-first"),
            ("2022", "Open-sourced the core engine"),
        ]:
            milestone(year, title)


def example_crowded():
    """Improved preset: many items, crowding-aware side selection."""
    with timeline(
            filename="docs/example_crowded",
            title="Release Train",
            subtitle="2015 - 2024",
            preset="improved",
    ):
        for i in range(10):
            milestone(str(2015 + i), f"Release {i + 1}.0 with notable improvements")


if __name__ == "__main__":
    import os

    os.makedirs("docs", exist_ok=True)

    print("Generating hero example...")
    hero_example()

    print("Generating zig-zag example...")
    example_zigzag()

    print("Generating crowded example...")
    example_crowded()

    print("\nAll examples generated in docs/")
