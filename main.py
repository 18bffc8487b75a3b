import logging
import sys

from models import TourConfig, TourReport
from tour import run_tour
from utils import clear_performance_metrics, get_performance_summary

logger = logging.getLogger(__name__)


def print_report(report: TourReport):
    for section in report.sections:
        print(f"\n--- {section.title} ---")
        for example in section.examples:
            print(f"{example.label}: {example.value}")


def main(config=None) -> int:
    logging.basicConfig(level=logging.INFO)
    config = config or TourConfig()

    clear_performance_metrics()
    report = run_tour(config)
    print_report(report)

    summary = get_performance_summary()
    logger.debug(
        f"{summary['total_operations']} sections, avg {summary['avg_time_ms']:.2f} ms, "
        f"avg peak {summary['avg_memory_mb']:.3f} MB"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
