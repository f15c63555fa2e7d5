import argparse
import logging
import sys

from .black_scholes import greeks, price, valuate
from .black_scholes_vec import strike_ladder
from .config import Settings
from .core import MarketParameters, OptionSide, CALL
from .errors import InvalidParameterError, PricingError
from .report import format_results, format_scenarios
from .scenario import scenario_analysis
from .session import run_session

logger = logging.getLogger(__name__)


def _kind(s: str):
    try:
        return OptionSide.parse(s)
    except ValueError:
        raise argparse.ArgumentTypeError("kind must be 'call' or 'put'") from None


def add_common(parser: argparse.ArgumentParser, *, strike: bool = True):
    parser.add_argument("--S0", type=float, required=True)
    if strike:
        parser.add_argument("--K", type=float, required=True)
    parser.add_argument("--T", type=float, required=True, help="years")
    parser.add_argument("--r", type=float, required=True, help="cont. risk-free")
    parser.add_argument("--sigma", type=float, required=True)


def _params(parser: argparse.ArgumentParser, args) -> MarketParameters:
    K = getattr(args, "K", None)
    try:
        return MarketParameters(args.S0, args.S0 if K is None else K, args.T, args.r, args.sigma)
    except InvalidParameterError as e:
        parser.error(str(e))


def cmd_interactive(parser, args, settings: Settings):
    run_session(settings=settings)


def cmd_price(parser, args, settings: Settings):
    opt = _params(parser, args)
    print(f"{price(opt, args.kind):.10f}")
    if args.greeks:
        for name, value in greeks(opt, args.kind).items():
            print(f"{name:<6} {value:.10f}")


def cmd_report(parser, args, settings: Settings):
    opt = _params(parser, args)
    print(format_results(valuate(opt), settings.precision))
    scenarios = scenario_analysis(
        opt,
        itm_ratio=settings.itm_strike_ratio,
        otm_ratio=settings.otm_strike_ratio,
    )
    print(format_scenarios(scenarios, settings.precision))


def cmd_ladder(parser, args, settings: Settings):
    opt = _params(parser, args)
    try:
        ladder = strike_ladder(opt, args.strikes)
    except ValueError as e:
        parser.error(str(e))
    p = settings.precision
    print(f"{'strike':>12} {'call':>12} {'put':>12}")
    for K, c, q in zip(ladder["strikes"], ladder["call"], ladder["put"]):
        print(f"{K:>12.{p}f} {c:>12.{p}f} {q:>12.{p}f}")


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    p = argparse.ArgumentParser(prog="bsgreeks", description="Black-Scholes option calculator")
    p.add_argument("--precision", type=int, default=None, help="decimal places in reports")
    p.add_argument("--log-level", dest="log_level", default=None, help="DEBUG|INFO|WARNING|ERROR")
    sub = p.add_subparsers(dest="cmd")

    # Interactive
    p_int = sub.add_parser("interactive", help="prompt for parameters (default)")
    p_int.set_defaults(func=cmd_interactive)

    # Single price
    p_px = sub.add_parser("price", help="Black-Scholes price of one side")
    add_common(p_px)
    p_px.add_argument("--kind", type=_kind, default=CALL, help="call|put")
    p_px.add_argument("--greeks", action="store_true", help="also print Greeks")
    p_px.set_defaults(func=cmd_price)

    # Full report
    p_rep = sub.add_parser("report", help="prices, Greeks and scenario analysis")
    add_common(p_rep)
    p_rep.set_defaults(func=cmd_report)

    # Strike ladder
    p_lad = sub.add_parser("ladder", help="call/put prices across strikes")
    add_common(p_lad, strike=False)
    p_lad.add_argument("--strikes", type=float, nargs="+", required=True)
    p_lad.set_defaults(func=cmd_ladder)

    args = p.parse_args(argv)
    try:
        settings = Settings.from_env().override(
            precision=args.precision, log_level=args.log_level
        )
    except ValueError as e:
        p.error(str(e))
    configure_logging(settings.log_level)
    logger.debug("settings %s", settings)

    func = getattr(args, "func", cmd_interactive)
    try:
        func(p, args, settings)
    except PricingError as e:
        p.error(str(e))


if __name__ == "__main__":
    main()
