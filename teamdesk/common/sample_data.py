"""Seed data served by the in-memory repositories."""

from __future__ import annotations

from typing import Any

DIRECTORY: list[dict[str, Any]] = [
    {"id": 1, "email": "admin@example.com", "password": "admin123", "role": "admin", "name": "Admin User"},
    {"id": 2, "email": "employee@example.com", "password": "employee123", "role": "employee", "name": "John Employee"},
    {"id": 3, "email": "jane@example.com", "password": "jane123", "role": "employee", "name": "Jane Smith"},
]

TASKS: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "Complete quarterly report",
        "description": "Prepare and submit Q1 performance report with all metrics",
        "due_date": "2025-04-20",
        "progress": 65,
        "priority": "high",
    },
    {
        "id": 2,
        "title": "Update client presentation",
        "description": "Update the slides for next week's client meeting",
        "due_date": "2025-04-25",
        "progress": 0,
        "priority": "medium",
    },
    {
        "id": 3,
        "title": "Review team documentation",
        "description": "Review and provide feedback on team documentation",
        "due_date": "2025-04-18",
        "progress": 30,
        "priority": "low",
    },
    {
        "id": 4,
        "title": "Prepare for weekly meeting",
        "description": "Prepare agenda and materials for weekly team meeting",
        "due_date": "2025-04-17",
        "progress": 100,
        "priority": "medium",
    },
    {
        "id": 5,
        "title": "Research new technologies",
        "description": "Research and compile report on emerging technologies in the industry",
        "due_date": "2025-04-30",
        "progress": 0,
        "priority": "low",
    },
]

LEAVE_REQUESTS: list[dict[str, Any]] = [
    {
        "id": 1,
        "start_date": "2025-05-10",
        "end_date": "2025-05-15",
        "reason": "Annual vacation",
        "status": "approved",
        "created_at": "2025-04-01",
        "comment": "Approved by manager. Enjoy your vacation!",
        "employee_id": 2,
        "employee_name": "John Employee",
    },
    {
        "id": 2,
        "start_date": "2025-04-25",
        "end_date": "2025-04-26",
        "reason": "Family event",
        "status": "pending",
        "created_at": "2025-04-10",
        "employee_id": 2,
        "employee_name": "John Employee",
    },
    {
        "id": 3,
        "start_date": "2025-03-15",
        "end_date": "2025-03-16",
        "reason": "Personal appointment",
        "status": "rejected",
        "created_at": "2025-03-01",
        "comment": "Too many team members are already on leave during this period.",
        "employee_id": 2,
        "employee_name": "John Employee",
    },
    {
        "id": 4,
        "start_date": "2025-04-28",
        "end_date": "2025-04-29",
        "reason": "Moving house",
        "status": "pending",
        "created_at": "2025-04-12",
        "employee_id": 3,
        "employee_name": "Jane Smith",
    },
    {
        "id": 5,
        "start_date": "2025-04-18",
        "end_date": "2025-04-19",
        "reason": "Medical appointment",
        "status": "approved",
        "created_at": "2025-04-05",
        "comment": "Approved. Get well soon.",
        "employee_id": 4,
        "employee_name": "Robert Johnson",
    },
    {
        "id": 6,
        "start_date": "2025-05-01",
        "end_date": "2025-05-02",
        "reason": "Personal leave",
        "status": "rejected",
        "created_at": "2025-04-15",
        "comment": "Denied due to high workload during this period.",
        "employee_id": 5,
        "employee_name": "Emily Davis",
    },
    {
        "id": 7,
        "start_date": "2025-06-10",
        "end_date": "2025-06-15",
        "reason": "Family vacation",
        "status": "pending",
        "created_at": "2025-04-20",
        "employee_id": 6,
        "employee_name": "Michael Wilson",
    },
]

EMPLOYEES: list[dict[str, Any]] = [
    {
        "id": 2,
        "name": "John Employee",
        "email": "employee@example.com",
        "position": "Marketing Specialist",
        "department": "Marketing",
        "task_completion": 75,
        "status": "active",
    },
    {
        "id": 3,
        "name": "Jane Smith",
        "email": "jane@example.com",
        "position": "UX Designer",
        "department": "Design",
        "task_completion": 60,
        "status": "active",
    },
    {
        "id": 4,
        "name": "Robert Johnson",
        "email": "robert@example.com",
        "position": "Software Developer",
        "department": "Engineering",
        "task_completion": 90,
        "status": "active",
    },
    {
        "id": 5,
        "name": "Emily Davis",
        "email": "emily@example.com",
        "position": "Content Writer",
        "department": "Marketing",
        "task_completion": 45,
        "status": "on-leave",
    },
    {
        "id": 6,
        "name": "Michael Wilson",
        "email": "michael@example.com",
        "position": "Product Manager",
        "department": "Product",
        "task_completion": 80,
        "status": "active",
    },
    {
        "id": 7,
        "name": "Sarah Brown",
        "email": "sarah@example.com",
        "position": "HR Specialist",
        "department": "Human Resources",
        "task_completion": 65,
        "status": "active",
    },
]

# Days remaining per leave category
LEAVE_BALANCE: list[dict[str, Any]] = [
    {"leave_type": "Annual Leave", "remaining_days": 14},
    {"leave_type": "Sick Leave", "remaining_days": 7},
    {"leave_type": "Personal Leave", "remaining_days": 3},
]
