"""Demographics wizard state - form values and the submit dialog"""
import reflex as rx
from reflex.utils import console

from .base_state import BaseState


class DemographicsState(BaseState):
    name: str = ""
    age: str = "20"
    submitted: bool = False

    @rx.var
    def info(self) -> str:
        return f"Age: {self.age}\nName: {self.name}\n"

    @rx.event
    def update_name(self, value: str):
        self.name = value

    @rx.event
    def update_age(self, value: str):
        self.age = value

    @rx.event
    def submit(self):
        console.info(f"Demographics submitted: name={self.name!r}, age={self.age!r}")
        self.submitted = True

    @rx.event
    def close_dialog(self):
        self.submitted = False
