# Supabase table: ai_notes
# Documents the expected table; queries live in service.py

"""
Expected Supabase table structure:

ai_notes:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (not null, references auth.users.id)
- title: text (not null, at most 255 characters)
- content: text (at most 10000 characters)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Guest notes are not stored in Supabase. GuestNoteStorage keeps them in one
JSON file per guest id under GUEST_STORAGE_DIR.
"""
