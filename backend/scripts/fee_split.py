#!/usr/bin/env python3
"""
Fee Split Preview
Shows how a fee is split between shipping and article per unit

Usage:
    python fee_split.py --ship 4.99 --article 19.99 --fee 1.25 --quantity 2

Author: TM3
Date: 2025-10-17
"""
import argparse
import logging
import sys

from order_mail.core.exceptions import InvalidArgument
from order_mail.core.logging_config import setup_logging
from order_mail.services.fee_service import FeeService

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Split a fee between shipping and article per unit")
    parser.add_argument("--ship", required=True, help="Shipping price")
    parser.add_argument("--article", required=True, help="Article price")
    parser.add_argument("--fee", required=True, help="Total fee")
    parser.add_argument("--quantity", default="1", help="Units (default: 1)")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        fee = FeeService().calculate_ship_and_article_fee_per_unit(
            args.ship, args.article, args.fee, args.quantity
        )
    except InvalidArgument as e:
        logger.error(f"❌ {e}")
        return 1

    print(f"Ship fee per unit:    {fee.ship_fee}")
    print(f"Article fee per unit: {fee.article_fee}")
    print(f"Total per unit:       {fee.total_per_unit}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
