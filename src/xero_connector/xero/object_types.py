"""Xero accounting API object types."""

from enum import StrEnum


class ReadableObjectType(StrEnum):
    """Object types that can be listed or fetched with GET."""

    ACCOUNTS = "Accounts"
    BANK_TRANSACTIONS = "BankTransactions"
    BANK_TRANSFERS = "BankTransfers"
    BRANDING_THEMES = "BrandingThemes"
    CONTACTS = "Contacts"
    CONTACT_GROUPS = "ContactGroups"
    CREDIT_NOTES = "CreditNotes"
    CURRENCIES = "Currencies"
    EMPLOYEES = "Employees"
    EXPENSE_CLAIMS = "ExpenseClaims"
    INVOICES = "Invoices"
    ITEMS = "Items"
    JOURNALS = "Journals"
    MANUAL_JOURNALS = "ManualJournals"
    ORGANISATION = "Organisation"
    PAYMENTS = "Payments"
    RECEIPTS = "Receipts"
    REPEATING_INVOICES = "RepeatingInvoices"
    REPORTS = "Reports"
    TAX_RATES = "TaxRates"
    TRACKING_CATEGORIES = "TrackingCategories"
    USERS = "Users"


class WritableObjectType(StrEnum):
    """Object types that can be created or updated with POST."""

    BANK_TRANSACTIONS = "BankTransactions"
    BANK_TRANSFERS = "BankTransfers"
    CONTACTS = "Contacts"
    CONTACT_GROUPS = "ContactGroups"
    CREDIT_NOTES = "CreditNotes"
    EMPLOYEES = "Employees"
    EXPENSE_CLAIMS = "ExpenseClaims"
    INVOICES = "Invoices"
    ITEMS = "Items"
    MANUAL_JOURNALS = "ManualJournals"
    PAYMENTS = "Payments"
    RECEIPTS = "Receipts"
    TRACKING_CATEGORIES = "TrackingCategories"
