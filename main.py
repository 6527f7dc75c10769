#!/usr/bin/env python3
import argparse
import logging
from typing import List, Optional

from config import SearchConfig
from fraction_chain import build_base_fractions, enumerate_chains, format_chain, select_chains

logger = logging.getLogger(__name__)


def run(config: SearchConfig) -> List[str]:
	base = build_base_fractions(config.limit, config.max_value)
	logger.info("searching %d base fractions for chains of length %d", len(base), config.length)
	chains = select_chains(enumerate_chains(base, config.length), config.max_product)
	rows = []
	for chain in chains:
		row = format_chain(chain, config.decimals)
		if row is None:
			logger.debug("skipping %r, no decimal approximation", chain)
			continue
		rows.append(row)
	return rows


def main(argv: Optional[List[str]] = None) -> None:
	parser = argparse.ArgumentParser(description="List products of small fractions ordered by value")
	parser.add_argument("--limit", type=int, default=None,
						help="Largest numerator of a base fraction")
	parser.add_argument("--max-value", type=int, default=None,
						help="Largest base fraction allowed")
	parser.add_argument("--length", type=int, default=None,
						help="Number of factors per chain")
	parser.add_argument("--max-product", type=int, default=None,
						help="Largest product reported")
	parser.add_argument("--decimals", type=int, default=None,
						help="Digits after the decimal point")
	parser.add_argument("--verbose", action="store_true")
	args = parser.parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	config = SearchConfig()
	if args.limit is not None:
		config.limit = args.limit
	if args.max_value is not None:
		config.max_value = args.max_value
	if args.length is not None:
		config.length = args.length
	if args.max_product is not None:
		config.max_product = args.max_product
	if args.decimals is not None:
		config.decimals = args.decimals

	for row in run(config):
		print(row)

if __name__ == "__main__":
	main()
