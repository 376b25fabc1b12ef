"""A shared account updated from several threads."""

from __future__ import annotations

import argparse
import threading
import time


class InsufficientFundsError(Exception):
    """Raised when a withdrawal exceeds the balance."""

    def __init__(self, amount: int, balance: int) -> None:
        super().__init__(f"cannot withdraw {amount}; current balance = {balance}")
        self.amount = amount
        self.balance = balance


class Account:
    """Balance guarded by a condition so withdrawals can wait for deposits."""

    def __init__(self, balance: int = 0) -> None:
        self._balance = balance
        self._changed = threading.Condition()

    @property
    def balance(self) -> int:
        with self._changed:
            return self._balance

    def add_money(self, amount: int) -> int:
        """Deposit ``amount`` and return the new balance."""
        with self._changed:
            self._balance += amount
            self._changed.notify()
            return self._balance

    def withdraw_money(self, amount: int, timeout: float | None = 1.0) -> int:
        """Wait up to ``timeout`` for a non-zero balance, withdraw, return the balance."""
        with self._changed:
            self._changed.wait_for(lambda: self._balance != 0, timeout)
            if self._balance < amount:
                raise InsufficientFundsError(amount, self._balance)
            self._balance -= amount
            return self._balance


def _run_all(calls) -> None:
    threads = [threading.Thread(target=target, args=(arg,)) for target, arg in calls]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bank", description="Shared account demo.")
    parser.add_argument(
        "scenario", nargs="?", choices=("withdrawals", "deposits"), default="withdrawals"
    )
    parser.add_argument("--work-seconds", type=float, default=1.0)
    args = parser.parse_args(argv)
    account = Account()

    if args.scenario == "deposits":
        serial = threading.Lock()

        def deposit(amount: int) -> None:
            with serial:
                print(f"Adding {amount} in thread {threading.get_ident()}")
                time.sleep(args.work_seconds)
                account.add_money(amount)

        _run_all([(deposit, 10), (deposit, 10), (deposit, 40)])
        print(f"Final amount = {account.balance}")
        return 0

    def add(amount: int) -> None:
        print(f"added money: {amount} ; Current Balance = {account.add_money(amount)}")

    def withdraw(amount: int) -> None:
        try:
            balance = account.withdraw_money(amount)
        except InsufficientFundsError as error:
            print(f"Cannot withdraw money ; Current Balance = {error.balance}")
        else:
            print(f"Withdrew money: {amount} ; Current Balance = {balance}")

    _run_all([(add, 500), (withdraw, 500), (add, 200), (withdraw, 10)])
    return 0