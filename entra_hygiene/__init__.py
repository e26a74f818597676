"""Entra ID hygiene reports over Microsoft Graph."""
