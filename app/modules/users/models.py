# Supabase tables: profiles, user_settings
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, references auth.users.id)
- email: text - synced from auth.users
- full_name: text (nullable)
- updated_at: timestamp (nullable)

user_settings:
- user_id: uuid (primary key, references auth.users.id)
- notifications_enabled: boolean (default: false)
- updated_at: timestamp (nullable)

send-updates reads both tables with the service-role key to build its
recipient list.
"""
