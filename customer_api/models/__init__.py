"""Database models for the customer records API"""

from customer_api.models.customer import Customer
