# Supabase table: link_history
# This file documents the expected database schema

"""
Expected Supabase table structure:

link_history:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (not null, references auth.users.id)
- link: text (not null)
- title: text (nullable)
- content_type: text (nullable) - classification returned by analyze-link
- summary: text (nullable)
- analysis_data: jsonb (nullable) - full analyze-link response
- created_at: timestamp (default: now())
"""
