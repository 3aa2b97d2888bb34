# Supabase table: profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# Authentication is handled by Supabase Auth (auth.users table)

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, references auth.users.id)
- name: text (not null) - set once at signup
- college: text (not null) - set once at signup
- created_at: timestamp (default: now())

Exactly one row exists per auth user. The row is written right after
auth.sign_up() succeeds, as a second independent request; there is no
transaction spanning both, so an identity can exist without its row.
"""
