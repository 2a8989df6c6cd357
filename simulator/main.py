"""Main entry point for the simulator"""
import sys
from typing import Dict, Any, List

import click

from simulator.config import (
    DATA_DIR, RESULTS_DIR, DEFAULT_NUMBER_OF_DRIVERS, DEFAULT_ROUTE_START_TIME,
    DEFAULT_MAX_HOURS_PER_DRIVER, RECENT_RESULTS_LIMIT
)
from simulator.exceptions import SimulatorError, ResultNotFoundError
from simulator.io import DataLoader, ResultStore
from simulator.models import RunParameters, SimulationResult
from simulator.analysis import OrderAnalyzer
from simulator.simulation import (
    simulate, select_active_drivers, ParameterValidator, InputValidator
)


class OutputFormatter:
    """Formats and displays simulation results"""

    @staticmethod
    def print_results(result: SimulationResult, input_issues: List[str] = None):
        """Pretty print a simulation result"""
        print("\n" + "="*80)
        print("📋 SIMULATION RESULTS")
        print("="*80)

        OutputFormatter._print_inputs(result)
        OutputFormatter._print_kpis(result)
        OutputFormatter._print_drivers(result)
        OutputFormatter._print_orders(result)
        OutputFormatter._print_warnings(result.warnings + (input_issues or []))

        print("\n" + "="*80)

    @staticmethod
    def print_analysis(analysis: Dict[str, Any]):
        """Print order analysis summary"""
        print(f"\n📊 Analysis Summary:")
        print(f"   Total Orders: {analysis['total_orders']}")
        print(f"   Total Order Value: Rs {analysis['total_value']:,.0f}")
        print(f"   High-Value Orders: {len(analysis['high_value_orders'])}")
        by_level = {k: len(v) for k, v in analysis['orders_by_traffic_level'].items()}
        print(f"   Orders by Traffic Level: {by_level}")
        if analysis['unresolved_orders']:
            print(f"   Orders with Missing Routes: {', '.join(analysis['unresolved_orders'])}")

    @staticmethod
    def print_history(results: List[SimulationResult]):
        """Print one line per stored simulation"""
        print(f"\n🗂️  RECENT SIMULATIONS ({len(results)}):")
        print("-"*80)
        for result in results:
            kpis = result.kpis
            print(f"   {result.created_at} | drivers: {result.inputs.number_of_drivers} | "
                  f"profit: Rs {kpis.total_profit:,} | "
                  f"efficiency: {kpis.efficiency:.2f}% | "
                  f"on time: {kpis.on_time_deliveries}/{kpis.total_deliveries}")

    @staticmethod
    def _print_inputs(result: SimulationResult):
        inputs = result.inputs
        print(f"\n⚙️  INPUTS:")
        print(f"   Drivers: {inputs.number_of_drivers}")
        print(f"   Route Start Time: {inputs.route_start_time}")
        print(f"   Max Hours/Driver: {inputs.max_hours_per_driver}")

    @staticmethod
    def _print_kpis(result: SimulationResult):
        kpis = result.kpis
        print(f"\n📊 KPIs:")
        print(f"   Total Profit: Rs {kpis.total_profit:,}")
        print(f"   Efficiency: {kpis.efficiency:.2f}%")
        print(f"   On-Time Deliveries: {kpis.on_time_deliveries}/{kpis.total_deliveries}")
        print(f"   Fuel Cost: " + ", ".join(
            f"{level} Rs {cost:,.2f}" for level, cost in kpis.fuel_cost_breakdown.items()
        ))

    @staticmethod
    def _print_drivers(result: SimulationResult):
        print(f"\n👥 DRIVER WORKLOAD ({len(result.drivers)} drivers):")
        print("-"*80)
        for workload in result.drivers:
            fatigue = " 😴 fatigued" if workload.fatigued else ""
            print(f"   {workload.name}{fatigue}: {workload.assigned_minutes} min, "
                  f"{len(workload.assigned_orders)} orders "
                  f"({workload.utilization:.0%} of max hours)")
            if workload.assigned_orders:
                print(f"      └─ Orders: {', '.join(workload.assigned_orders)}")

    @staticmethod
    def _print_orders(result: SimulationResult):
        print(f"\n📦 ORDERS ({len(result.per_order)}, highest value first):")
        print("-"*80)
        for order in result.per_order:
            if order.is_error:
                print(f"   ❌ {order.order_id}: {order.error}")
                continue
            status = "✓ on time" if order.on_time else "⚠️ late"
            print(f"   {order.order_id} [{order.route_id}] Rs {order.value_rs:,.0f} → "
                  f"{order.assigned_driver} | {order.time_to_deliver_minutes} min {status} | "
                  f"bonus {order.bonus:,.2f} | penalty {order.penalty:,.0f} | "
                  f"fuel {order.fuel_cost:,.2f} | profit {order.profit:,.2f}")

    @staticmethod
    def _print_warnings(warnings: List[str]):
        if warnings:
            print(f"\n⚠️  WARNINGS ({len(warnings)}):")
            print("-"*80)
            for warning in warnings:
                print(f"   • {warning}")
        else:
            print(f"\n✅ No warnings")


@click.group()
def cli():
    """Delivery simulation: assign orders to drivers and report KPIs."""


@cli.command()
@click.option('--drivers', 'number_of_drivers', type=int, default=DEFAULT_NUMBER_OF_DRIVERS,
              show_default=True, help='Number of active drivers to use.')
@click.option('--start-time', 'route_start_time', default=DEFAULT_ROUTE_START_TIME,
              show_default=True, help='Route start time (HH:MM).')
@click.option('--max-hours', 'max_hours_per_driver', type=float,
              default=DEFAULT_MAX_HOURS_PER_DRIVER, show_default=True,
              help='Max hours per driver (reported, not enforced).')
@click.option('--data-dir', default=DATA_DIR, show_default=True, type=click.Path())
@click.option('--results-dir', default=RESULTS_DIR, show_default=True, type=click.Path())
@click.option('--no-save', is_flag=True, help='Do not store the result.')
def run(number_of_drivers, route_start_time, max_hours_per_driver, data_dir, results_dir, no_save):
    """Run a simulation over the drivers, routes and orders in DATA_DIR."""
    params = RunParameters(
        number_of_drivers=number_of_drivers,
        route_start_time=route_start_time,
        max_hours_per_driver=max_hours_per_driver,
    )
    issues = ParameterValidator.validate(params)
    if issues:
        for issue in issues:
            click.echo(f"❌ {issue}", err=True)
        sys.exit(2)

    print("📂 Loading data...")
    try:
        drivers, routes, orders = DataLoader.load_dataset(data_dir)
    except SimulatorError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    input_issues = InputValidator(drivers, routes, orders).validate()
    OutputFormatter.print_analysis(OrderAnalyzer.analyze(orders, routes))

    print(f"\n🚚 Running simulation with {number_of_drivers} driver(s)...")
    try:
        result = simulate(
            select_active_drivers(drivers, number_of_drivers), routes, orders, params
        )
    except SimulatorError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    OutputFormatter.print_results(result, input_issues)

    if not no_save:
        ResultStore(results_dir).save(result)


@cli.command()
@click.option('--results-dir', default=RESULTS_DIR, show_default=True, type=click.Path())
def latest(results_dir):
    """Show the most recent stored simulation."""
    try:
        result = ResultStore(results_dir).latest()
    except ResultNotFoundError as e:
        click.echo(f"⚠️  {e}", err=True)
        sys.exit(1)
    except SimulatorError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)
    OutputFormatter.print_results(result)


@cli.command()
@click.option('--limit', type=click.IntRange(min=1), default=RECENT_RESULTS_LIMIT, show_default=True)
@click.option('--results-dir', default=RESULTS_DIR, show_default=True, type=click.Path())
def history(limit, results_dir):
    """List recent stored simulations, newest first."""
    try:
        results = ResultStore(results_dir).recent(limit)
    except SimulatorError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)
    OutputFormatter.print_history(results)


@cli.command()
@click.option('--data-dir', default=DATA_DIR, show_default=True, type=click.Path())
def seed(data_dir):
    """Write sample drivers, routes and orders CSV files."""
    written = DataLoader.write_sample_data(data_dir)
    if written:
        print(f"✅ Wrote {len(written)} sample file(s) to {data_dir}")
    else:
        print(f"ℹ️  Sample files already present in {data_dir}")


def main():
    """Main entry point"""
    cli()


if __name__ == "__main__":
    main()
