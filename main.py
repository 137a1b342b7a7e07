#!/usr/bin/env python3
"""
Duct Sizer - CLI Calculator

Features:
- Air volume calculator for serial duct segments (cumulative airflow)
- Rectangular to round duct conversion
- Round to rectangular duct conversion
- Quick round duct lookup table at a fixed air speed
- Rectangular duct recommendations by air volume and speed
"""

import sys

import pandas as pd

from ductcalc.airflow import DEFAULT_SPEED_MPS
from ductcalc.inputs import parse_number_list, prompt_choice, prompt_number
from ductcalc.tables import (
    NO_RECT_MESSAGE,
    airflow_table,
    quick_lookup_table,
    rect_recommendation_table,
    rect_to_round_summary,
    round_to_rect_table,
    undersized_warnings,
)
from ductcalc.units import DEFAULT_UNITS, get_unit_options


def display_welcome():
    """Display welcome message and available tools."""
    print("="*70)
    print("🌬️  DUCT SIZER")
    print("="*70)
    print("HVAC duct sizing from air volume and air speed")
    print("\nTools:")
    print("• Air volume calculator (serial segments)")
    print("• Rectangular → round and round → rectangular conversion")
    print("• Quick round duct lookup table")
    print("• Rectangular duct recommendations")
    print("="*70)


def get_menu_choice() -> int:
    """Get main menu selection from user."""
    print("\n🔧 CALCULATION OPTIONS:")
    print("1. Air Volume Calculator")
    print("2. Rectangular → Round")
    print("3. Round → Rectangular")
    print("4. Quick Lookup Table (Round)")
    print("5. Rectangular Recommendation Table")
    print("6. Exit")

    while True:
        choice = input("\nSelect option [1-6]: ").strip()
        if choice in ['1', '2', '3', '4', '5', '6']:
            return int(choice)
        print("Please enter a number from 1 to 6")


def get_number_list(prompt: str):
    """Ask for a list of numbers until at least one is entered."""
    while True:
        values = parse_number_list(input(prompt))
        if values:
            return values
        print("Please enter at least one number (separated by spaces or commas).")


def print_table(df: pd.DataFrame):
    print(df.to_string(index=False, float_format=lambda x: f"{x:.4f}"))


def run_airflow_calculator():
    """Size serial duct segments from their air volumes."""
    print("\n🌬️  AIR VOLUME CALCULATOR")

    volume_unit = prompt_choice("Air volume unit", get_unit_options('air_volume'), DEFAULT_UNITS['air_volume'])
    volumes = get_number_list("Air volume per segment (e.g. 10 20 30): ")
    speed_unit = prompt_choice("Air speed unit", get_unit_options('air_speed'), DEFAULT_UNITS['air_speed'])
    speeds = parse_number_list(input(f"Air speed, one or one per segment [default {DEFAULT_SPEED_MPS:g}]: "))
    if not speeds:
        speeds = [DEFAULT_SPEED_MPS]

    df = airflow_table(volumes, volume_unit, speeds, speed_unit)

    print("\n" + "="*50)
    print("📊 SEGMENT SIZING RESULTS")
    print("="*50)
    print_table(df.drop(columns=['Undersized']))

    warnings = undersized_warnings(df)
    if warnings:
        print("\n⚠️  UNDERSIZED SEGMENTS:")
        for warning in warnings:
            print(f"   {warning}")


def run_rect_to_round():
    """Recommend a round duct for a rectangular duct."""
    print("\n⬛ RECTANGULAR → ROUND")

    unit = prompt_choice("Length unit", get_unit_options('length'), DEFAULT_UNITS['length'])
    length = prompt_number(f"Length ({unit}): ")
    width = prompt_number(f"Width ({unit}): ")

    result = rect_to_round_summary(length, unit, width, unit)

    print(f"\nRectangular area: {result['Rectangular Area (m²)']:.4f} m²")
    print(f"Recommended round duct: {result['Diameter (mm)']} mm "
          f"(area {result['Duct Area (m²)']:.4f} m²)")
    if result['Undersized']:
        print("⚠️  Area exceeds the largest standard duct.")


def run_round_to_rect():
    """List rectangular ducts equivalent to a round duct."""
    print("\n⚪ ROUND → RECTANGULAR")

    diameter = prompt_number("Round duct diameter (mm): ")
    df = round_to_rect_table(diameter)

    if df.empty:
        print(f"❌ {NO_RECT_MESSAGE}")
        return
    print_table(df)


def run_quick_lookup():
    """Quick lookup of round ducts for several volumes at one speed."""
    print("\n📋 QUICK LOOKUP TABLE")

    speed_unit = prompt_choice("Air speed unit", get_unit_options('air_speed'), DEFAULT_UNITS['air_speed'])
    speed = prompt_number(f"Fixed air speed [default {DEFAULT_SPEED_MPS:g}]: ", default=DEFAULT_SPEED_MPS)
    volumes = get_number_list("Air volumes in CMM (e.g. 100 250 600): ")

    df = quick_lookup_table(volumes, speed, speed_unit)
    print(df.to_string(index=False, na_rep='-', float_format=lambda x: f"{x:.1f}"))


def run_rect_recommendation():
    """Recommend rectangular ducts for an air volume and speed."""
    print("\n📐 RECTANGULAR RECOMMENDATION TABLE")

    volume_unit = prompt_choice("Air volume unit", get_unit_options('air_volume'), DEFAULT_UNITS['air_volume'])
    volume = prompt_number("Air volume: ")
    speed_unit = prompt_choice("Air speed unit", get_unit_options('air_speed'), DEFAULT_UNITS['air_speed'])
    speed = prompt_number(f"Air speed [default {DEFAULT_SPEED_MPS:g}]: ", default=DEFAULT_SPEED_MPS)

    df = rect_recommendation_table(volume, volume_unit, speed, speed_unit)

    if df.empty:
        print(f"❌ {NO_RECT_MESSAGE} (area ratio out of range)")
        return
    print_table(df)


TOOLS = {
    1: run_airflow_calculator,
    2: run_rect_to_round,
    3: run_round_to_rect,
    4: run_quick_lookup,
    5: run_rect_recommendation,
}


def main_calculator():
    """Main calculator flow control."""
    display_welcome()

    while True:
        choice = get_menu_choice()

        if choice == 6:
            print("\n👋 Thank you for using Duct Sizer!")
            sys.exit(0)

        try:
            TOOLS[choice]()
        except ValueError as e:
            print(f"❌ {e}")

        # Ask if user wants to continue
        if input("\nRun another calculation? [Y/n]: ").lower() in ['n', 'no']:
            print("\n👋 Thank you for using Duct Sizer!")
            break


if __name__ == "__main__":
    try:
        main_calculator()
    except KeyboardInterrupt:
        print("\n\n🛑 Operation cancelled by user.")
        sys.exit(0)
    except Exception as e:
        print(f"\n💥 Unexpected error: {e}")
        print("Please report this issue with your input parameters.")
        sys.exit(1)
