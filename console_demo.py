"""
Offline console demo: walks the salon back end end-to-end in the terminal.

Uses the real recommendation engine, outreach generator and analytics on
a repository loaded with demo data. No server, no network calls.

Usage:
    python console_demo.py
    python console_demo.py --scenario recommendations
    python console_demo.py --scenario outreach
    python console_demo.py --scenario analytics
"""

import argparse
from typing import Optional

from salonassist.analytics.metrics import calculate_for_repository
from salonassist.config import settings
from salonassist.outreach.generator import OutreachGenerator
from salonassist.outreach.selection import RandomSelector
from salonassist.outreach.service import OutreachService
from salonassist.recommendation.service import RecommendationService
from salonassist.schemas.catalog_schema import ItemType
from salonassist.schemas.outreach_schema import SuggestionStatus
from salonassist.store.errors import RecordNotFoundError
from salonassist.store.repository import SalonRepository, create_repository

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

HELP_TEXT = """Commands:
  appointments                 list today's appointments
  recs <appointment id>        show cross-sell recommendations
  accept <apt id> <item>       add a recommended item to the appointment
  dismiss <apt id> <item>      hide a recommended item for the appointment
  outreach                     generate email suggestions
  pending                      list pending email suggestions
  send <suggestion id>         mark a suggestion as sent
  report                       print the analytics report
  quit"""


class ConsoleSession:
    """Drives the recommendation, outreach and analytics flows from the terminal."""

    SCENARIOS = ("recommendations", "outreach", "analytics")

    def __init__(self, repo: Optional[SalonRepository] = None) -> None:
        self.repo = repo or create_repository(seed=True)
        self.recommendations = RecommendationService(self.repo)
        self.outreach = OutreachService(
            self.repo, OutreachGenerator(RandomSelector(settings.random_seed))
        )

    def say(self, text: str) -> None:
        print(f"{GREEN}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.app_name.upper()} - {title}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    # ------------------------------------------------------------------ #
    # Scenarios
    # ------------------------------------------------------------------ #

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        if scenario == "recommendations":
            self.banner("Scenario: recommendations")
            self.show_appointments()
            self.show_recommendations("apt-001")
            self.accept("apt-001", "Beard Oil")
            self.dismiss("apt-001", "Sea Salt Spray")
            self.show_recommendations("apt-001")
        elif scenario == "outreach":
            self.banner("Scenario: outreach")
            self.generate_outreach()
            pending = self.repo.suggestions.pending()
            if pending:
                self.send(pending[-1].id)
            self.generate_outreach()
            self.show_stats()
        elif scenario == "analytics":
            self.banner("Scenario: analytics")
            self.show_report()
        else:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")

    def run(self) -> None:
        self.banner("Console Demo")
        print(f"{DIM}{HELP_TEXT}{RESET}")

        while True:
            command = input(f"\n{BLUE}salon> {RESET}").strip()
            if not command:
                continue
            if command.lower() in ("quit", "exit", "q"):
                print(f"\n{DIM}Session ended.{RESET}")
                return
            try:
                self._dispatch(command)
            except RecordNotFoundError as exc:
                print(f"{RED}{exc}{RESET}")

    def _dispatch(self, command: str) -> None:
        verb, _, rest = command.partition(" ")
        verb = verb.lower()
        rest = rest.strip()

        if verb == "appointments":
            self.show_appointments()
        elif verb == "recs" and rest:
            self.show_recommendations(rest)
        elif verb in ("accept", "dismiss") and " " in rest:
            apt_id, item_name = rest.split(" ", 1)
            if verb == "accept":
                self.accept(apt_id, item_name.strip())
            else:
                self.dismiss(apt_id, item_name.strip())
        elif verb == "outreach":
            self.generate_outreach()
        elif verb == "pending":
            self.show_pending()
        elif verb == "send" and rest.isdigit():
            self.send(int(rest))
        elif verb == "report":
            self.show_report()
        else:
            print(f"{YELLOW}Unrecognised command.{RESET}\n{DIM}{HELP_TEXT}{RESET}")

    # ------------------------------------------------------------------ #
    # Recommendations
    # ------------------------------------------------------------------ #

    def show_appointments(self) -> None:
        for apt in self.repo.appointments.list_all():
            booked = ", ".join(apt.services + apt.products)
            print(f"  {apt.id}  {apt.date} {apt.time}  {apt.client_name:<16} "
                  f"[{apt.status.value}]  {booked}")

    def show_recommendations(self, appointment_id: str) -> None:
        result = self.recommendations.recommendations_for(appointment_id)
        self.system_log(f"Recommendations for {appointment_id}")
        if not result.all():
            self.say("No recommendations for this appointment.")
            return
        for label, items in (
            ("Services", result.service_recommendations),
            ("Products", result.product_recommendations),
        ):
            if not items:
                continue
            print(f"{BOLD}  {label}{RESET}")
            for rec in items:
                print(f"    {rec.name:<30} {DIM}{rec.reason} (rules: {rec.rule_count}){RESET}")

    def _item_type(self, name: str) -> ItemType:
        if self.repo.catalog.find_by_name(ItemType.SERVICE, name) is not None:
            return ItemType.SERVICE
        return ItemType.PRODUCT

    def accept(self, appointment_id: str, item_name: str) -> None:
        apt = self.recommendations.accept(appointment_id, item_name, self._item_type(item_name))
        self.say(f"Added {item_name} to {apt.client_name}'s appointment.")

    def dismiss(self, appointment_id: str, item_name: str) -> None:
        created = self.recommendations.dismiss(appointment_id, item_name, self._item_type(item_name))
        self.say(f"{item_name} hidden for {appointment_id}." if created
                 else f"{item_name} was already dismissed.")

    # ------------------------------------------------------------------ #
    # Outreach
    # ------------------------------------------------------------------ #

    def generate_outreach(self) -> None:
        response = self.outreach.generate()
        self.say(response.message)
        for suggestion in response.suggestions:
            self.system_log(
                f"#{suggestion.id} {suggestion.type.value:<24} "
                f"{suggestion.client_name:<16} {suggestion.reason}"
            )

    def show_pending(self) -> None:
        pending = self.outreach.list_suggestions(status=SuggestionStatus.PENDING)
        if not pending:
            self.say("No pending suggestions. Try 'outreach' first.")
        for suggestion in pending:
            print(f"  #{suggestion.id:<4} {suggestion.client_name:<16} {suggestion.subject}")

    def send(self, suggestion_id: int) -> None:
        suggestion = self.outreach.send(suggestion_id)
        self.say(f"Marked #{suggestion.id} to {suggestion.client_name} as sent.")
        print(f"{DIM}{suggestion.content}{RESET}")

    def show_stats(self) -> None:
        stats = self.outreach.stats()
        self.system_log(
            f"Pending: {stats.pending}, sent this week: {stats.sent_this_week}, "
            f"by type: {stats.by_type.model_dump()}"
        )

    # ------------------------------------------------------------------ #
    # Analytics
    # ------------------------------------------------------------------ #

    def show_report(self) -> None:
        calculator, metrics = calculate_for_repository(self.repo)
        print(calculator.format_report(metrics))


def main() -> None:
    parser = argparse.ArgumentParser(description="Offline console demo")
    parser.add_argument(
        "--scenario",
        choices=ConsoleSession.SCENARIOS,
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    args = parser.parse_args()

    session = ConsoleSession()
    if args.scenario:
        session.run_scenario(args.scenario)
    else:
        session.run()


if __name__ == "__main__":
    main()
