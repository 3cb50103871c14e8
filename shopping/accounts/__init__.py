# =============================================================================
# Shopping Content API Samples - Accounts
# =============================================================================
"""
Account samples.

- account_status: get / list / workflow for Accountstatuses
- account_tax: get / list / workflow for Accounttax
- shipping_settings: get / list for Shippingsettings
- add_user: add a user to the primary account
- delete_account_batch: custombatch delete of MCA sub-accounts
"""
