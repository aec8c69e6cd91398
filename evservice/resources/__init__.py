"""
Endpoint groups of the EV Service Center API.
"""
from evservice.client import ApiClient
from evservice.resources.appointments import AppointmentsResource
from evservice.resources.auth import AuthResource, UsersResource
from evservice.resources.contacts import ContactsResource, DashboardResource, ReportsResource
from evservice.resources.invoices import InvoicesResource
from evservice.resources.parts import PartRequestsResource, PartsResource
from evservice.resources.services import ServicesResource
from evservice.resources.slots import SlotsResource
from evservice.resources.technicians import TechniciansResource
from evservice.resources.transactions import TransactionsResource
from evservice.resources.vehicles import VehiclesResource
from evservice.resources.vnpay import VNPayResource


class EVServiceAPI:
    """All endpoint groups sharing one client."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.auth = AuthResource(client)
        self.users = UsersResource(client)
        self.appointments = AppointmentsResource(client)
        self.parts = PartsResource(client)
        self.part_requests = PartRequestsResource(client)
        self.invoices = InvoicesResource(client)
        self.vehicles = VehiclesResource(client)
        self.services = ServicesResource(client)
        self.technicians = TechniciansResource(client)
        self.slots = SlotsResource(client)
        self.transactions = TransactionsResource(client)
        self.vnpay = VNPayResource(client)
        self.contacts = ContactsResource(client)
        self.reports = ReportsResource(client)
        self.dashboard = DashboardResource(client)

    @property
    def notifier(self):
        return self.client.notifier

    @property
    def token_store(self):
        return self.client.token_store


__all__ = ["EVServiceAPI"]
