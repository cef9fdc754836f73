# -*- coding: utf-8 -*-
"""
Playwright smoke test - run against a live `reflex run`

Checks that every gallery page loads and that the wizard buttons move between
pages. Usage: python smoke_test.py [base_url]
"""

import asyncio
import sys
from datetime import datetime

from playwright.async_api import async_playwright

ROUTES = [
    "/",
    "/radio-extra",
    "/dataset",
    "/select-var",
    "/histogram",
    "/multi-output",
    "/wizard",
    "/wizard/demographics",
]


class SmokeTester:
    def __init__(self, base_url="http://localhost:3000", timeout=30000):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.results = {
            "passed": [],
            "failed": [],
        }

    async def run_tests(self) -> bool:
        """Run all tests"""
        print("=" * 80)
        print("MODULE GALLERY SMOKE TEST")
        print(f"Start time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        print("=" * 80)

        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True)
            try:
                page = await browser.new_page()
                page.set_default_timeout(self.timeout)

                for route in ROUTES:
                    await self.test_route(page, route)

                await self.test_wizard_navigation(page)
                await self.test_radio_other(page)
            finally:
                await browser.close()

        return self.print_results()

    async def test_route(self, page, route):
        try:
            response = await page.goto(self.base_url + route)
            if response and response.ok:
                self.results["passed"].append(f"{route} loaded")
                print(f"[PASS] {route} ({response.status})")
            else:
                self.results["failed"].append(f"{route} failed ({response.status if response else 'None'})")
                print(f"[FAIL] {route}")
        except Exception as e:
            self.results["failed"].append(f"{route} error: {e}")
            print(f"[ERROR] {route}: {e}")

    async def test_wizard_navigation(self, page):
        """next/prev buttons switch pages; the other wizard is unaffected"""
        try:
            await page.goto(self.base_url + "/wizard")
            await page.click("[id='whiz/go_1_2']")
            await page.wait_for_selector("[id='whiz/go_2_3']")
            await page.wait_for_selector("[id='whiz_short/go_1_2']")
            await page.click("[id='whiz/go_2_1']")
            await page.wait_for_selector("[id='whiz/go_1_2']")
            self.results["passed"].append("Wizard navigation")
            print("[PASS] Wizard navigation")
        except Exception as e:
            self.results["failed"].append(f"Wizard navigation: {e}")
            print(f"[FAIL] Wizard navigation: {e}")

    async def test_radio_other(self, page):
        """Typing in the other box selects it"""
        try:
            await page.goto(self.base_url + "/radio-extra")
            await page.fill("[id='gender/other']", "non-binary")
            await page.wait_for_selector("text=Selected: non-binary")
            self.results["passed"].append("Radio other text")
            print("[PASS] Radio other text")
        except Exception as e:
            self.results["failed"].append(f"Radio other text: {e}")
            print(f"[FAIL] Radio other text: {e}")

    def print_results(self) -> bool:
        print()
        print("=" * 80)
        print(f"PASSED: {len(self.results['passed'])}")
        for result in self.results["passed"]:
            print(f"   + {result}")
        print(f"FAILED: {len(self.results['failed'])}")
        for result in self.results["failed"]:
            print(f"   - {result}")
        print("=" * 80)
        return not self.results["failed"]


async def main():
    base_url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:3000"
    success = await SmokeTester(base_url).run_tests()
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    asyncio.run(main())
