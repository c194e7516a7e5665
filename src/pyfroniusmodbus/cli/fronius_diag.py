#!/usr/bin/env python3
"""Diagnostic tool for pyfroniusmodbus.

Connects to a Fronius inverter or smart meter over Modbus TCP or RTU,
runs SunSpec recognition and prints identity, register model and every
measurement the device exposes.

Usage:
    pyfroniusmodbus-diag --host 192.168.1.50
    pyfroniusmodbus-diag --host 192.168.1.50 --unit 240 --meter --json
    pyfroniusmodbus-diag --serial-port /dev/ttyUSB0 --baudrate 9600 --meter
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Callable
from typing import Any

from pyfroniusmodbus import __version__
from pyfroniusmodbus.config import DeviceConfig
from pyfroniusmodbus.devices import FroniusDevice, Inverter, Meter
from pyfroniusmodbus.events import StateUnknown
from pyfroniusmodbus.exceptions import FroniusError, FroniusValueError, StateError
from pyfroniusmodbus.models import EnergyPeriod, Input, Phase, PhasePair, TemperatureKind
from pyfroniusmodbus.transports import (
    BaseModbusTransport,
    TransportConfig,
    TransportType,
    create_transport,
)

_LOGGER = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="pyfroniusmodbus-diag",
        description="Read and decode SunSpec registers from Fronius inverters and meters.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pyfroniusmodbus-diag --host 192.168.1.50
      Inverter at unit 1 via Modbus TCP

  pyfroniusmodbus-diag --host 192.168.1.50 --unit 240 --meter
      Smart Meter behind the Datamanager

  pyfroniusmodbus-diag --host fe80::1 --json
      IPv6 host, JSON output

  pyfroniusmodbus-diag --serial-port /dev/ttyUSB0 --meter --unit 2
      Smart Meter on an RS485 line
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    conn_group = parser.add_argument_group("Connection Options")
    target = conn_group.add_mutually_exclusive_group(required=True)
    target.add_argument("--host", "-H", help="Device IPv4/IPv6 address or hostname")
    target.add_argument("--serial-port", help="Serial device for Modbus RTU")
    conn_group.add_argument(
        "--port", "-p", type=int, default=502, help="TCP port (default: %(default)s)"
    )
    conn_group.add_argument(
        "--baudrate", type=int, default=9600, help="Serial baud rate (default: %(default)s)"
    )
    conn_group.add_argument(
        "--timeout", type=float, default=10.0, help="Timeout in seconds (default: %(default)s)"
    )

    device_group = parser.add_argument_group("Device Options")
    device_group.add_argument(
        "--unit", "-u", type=int, default=1, help="Modbus unit address (default: %(default)s)"
    )
    device_group.add_argument(
        "--meter", action="store_true", help="Treat the device as a smart meter"
    )
    device_group.add_argument(
        "--fronius-registers",
        action="store_true",
        help="Also read Fronius site totals and status registers (inverters only)",
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument("--json", action="store_true", help="Print a JSON document")
    output_group.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def _optional(read: Callable[[], Any]) -> Any:
    """Return an accessor result, or None where the device lacks the quantity."""
    try:
        value = read()
    except (FroniusValueError, StateError) as err:
        _LOGGER.debug("Skipping value: %s", err)
        return None
    return _plain(value)


def _plain(value: Any) -> Any:
    if isinstance(value, StateUnknown):
        return value.description
    if hasattr(value, "name"):
        return value.name
    return value


def _phases(phase_count: int) -> list[Phase]:
    return [Phase.A, Phase.B, Phase.C][:phase_count]


def collect_inverter(inverter: Inverter) -> dict[str, Any]:
    """Collect every inverter measurement into a plain dictionary."""
    phases = _phases(inverter.phase_count())
    inputs = [Input.A, Input.B][: inverter.input_count()]
    data: dict[str, Any] = {
        "ac": {
            "current": _optional(lambda: inverter.ac_current(Phase.TOTAL)),
            "current_per_phase": {
                p.value: _optional(lambda p=p: inverter.ac_current(p)) for p in phases
            },
            "voltage_per_phase": {
                p.value: _optional(lambda p=p: inverter.ac_voltage(p)) for p in phases
            },
            "active_power": _optional(inverter.ac_active_power),
            "apparent_power": _optional(inverter.ac_apparent_power),
            "reactive_power": _optional(inverter.ac_reactive_power),
            "power_factor": _optional(inverter.ac_power_factor),
            "frequency": _optional(inverter.ac_frequency),
            "lifetime_energy": _optional(inverter.ac_lifetime_energy),
        },
        "dc": {
            "current": _optional(inverter.dc_current),
            "voltage": _optional(inverter.dc_voltage),
            "power": _optional(inverter.dc_power),
            "inputs": {
                i.value: {
                    "label": _optional(lambda i=i: inverter.dc_input_label(i)),
                    "current": _optional(lambda i=i: inverter.dc_current(i)),
                    "voltage": _optional(lambda i=i: inverter.dc_voltage(i)),
                    "power": _optional(lambda i=i: inverter.dc_power(i)),
                    "energy": _optional(lambda i=i: inverter.dc_energy(i)),
                    "state": _optional(lambda i=i: inverter.dc_input_state(i)),
                }
                for i in inputs
            },
        },
        "status": {
            "operating_state": _optional(inverter.operating_state),
            "vendor_operating_state": _optional(inverter.vendor_operating_state),
            "events": [flag.name for flag in inverter.event_flags()],
            "cabinet_temperature": _optional(
                lambda: inverter.temperatures(TemperatureKind.CABINET)
            ),
        },
    }
    if inverter.has_storage_block:
        storage = inverter.storage()
        data["storage"] = {
            "state_of_charge": storage.state_of_charge,
            "charge_status": _plain(storage.charge_status),
            "max_charge_power": storage.max_charge_power,
            "min_reserve": storage.min_reserve,
        }
    if inverter.config.read_fronius_registers:
        data["site"] = {
            "power": _optional(inverter.site_power),
            "energy": {
                period.value: _optional(lambda period=period: inverter.site_energy(period))
                for period in EnergyPeriod
            },
            "active_state_code": _optional(inverter.active_state_code),
        }
    return data


def collect_meter(meter: Meter) -> dict[str, Any]:
    """Collect every meter measurement into a plain dictionary."""
    tags = [Phase.TOTAL, *_phases(meter.phase_count())]

    def per_phase(read: Callable[[Phase], float]) -> dict[str, Any]:
        return {p.value: _optional(lambda p=p: read(p)) for p in tags}

    return {
        "current": per_phase(meter.ac_current),
        "voltage": {
            p.value: _optional(lambda p=p: meter.ac_voltage(p))
            for p in (Phase.AVERAGE, *_phases(meter.phase_count()))
        },
        "voltage_phase_to_phase": {
            pair.value: _optional(lambda pair=pair: meter.ac_voltage_phase_to_phase(pair))
            for pair in PhasePair
        },
        "frequency": _optional(meter.ac_frequency),
        "active_power": per_phase(meter.ac_active_power),
        "apparent_power": per_phase(meter.ac_apparent_power),
        "reactive_power": per_phase(meter.ac_reactive_power),
        "power_factor": per_phase(meter.ac_power_factor),
        "energy_exported": per_phase(meter.ac_energy_exported),
        "energy_imported": per_phase(meter.ac_energy_imported),
        "events": [flag.name for flag in meter.event_flags()],
    }


def _print_section(title: str, values: dict[str, Any], indent: int = 2) -> None:
    print(f"{' ' * (indent - 2)}{title}:")
    for key, value in values.items():
        if isinstance(value, dict):
            _print_section(key, value, indent + 2)
        else:
            print(f"{' ' * indent}{key}: {value}")


def build_transport(args: argparse.Namespace) -> BaseModbusTransport:
    """Create the transport selected on the command line."""
    if args.serial_port:
        config = TransportConfig(
            transport_type=TransportType.MODBUS_RTU,
            serial_port=args.serial_port,
            baudrate=args.baudrate,
            timeout=args.timeout,
        )
    else:
        config = TransportConfig(
            transport_type=TransportType.MODBUS_TCP,
            host=args.host,
            port=args.port,
            timeout=args.timeout,
        )
    return create_transport(config)


async def run(args: argparse.Namespace) -> int:
    """Connect, recognize and print the device."""
    transport = build_transport(args)
    config = DeviceConfig(
        unit_address=args.unit,
        read_fronius_registers=args.fronius_registers,
    )

    async with transport:
        device: FroniusDevice
        if args.meter:
            device = Meter(transport, config)
        else:
            device = Inverter(transport, config)
        await device.validate()
        report = device.to_dict()
        if isinstance(device, Meter):
            report["measurements"] = collect_meter(device)
        else:
            assert isinstance(device, Inverter)
            report["measurements"] = collect_inverter(device)

    if args.json:
        print(json.dumps(report, indent=2, default=str))
    else:
        identity = report.pop("identity")
        measurements = report.pop("measurements")
        _print_section("Identity", identity)
        _print_section("Device", report)
        _print_section("Measurements", measurements)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return asyncio.run(run(args))
    except ValueError as err:
        print(f"✗ Invalid configuration: {err}", file=sys.stderr)
        return 1
    except FroniusError as err:
        print(f"✗ {type(err).__name__}: {err}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
