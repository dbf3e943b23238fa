"""Attendance Repository Interface

Persistence for attendance snapshots and their call links.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from src.domain.attendance_record import AttendanceRecord


class AttendanceRepository(ABC):
    @abstractmethod
    async def create_for_call(self, call_id: int, record: AttendanceRecord) -> AttendanceRecord:
        """
        Persist an attendance record and link it to a call

        Returns:
            Created AttendanceRecord with generated ID
        """
        pass

    @abstractmethod
    async def get_by_call(self, call_id: int) -> List[AttendanceRecord]:
        """Attendance records linked to a call, oldest first"""
        pass

    @abstractmethod
    async def get_by_calls(self, call_ids: List[int]) -> Dict[int, List[AttendanceRecord]]:
        """Attendance records grouped by call ID"""
        pass

    @abstractmethod
    async def get_by_call_and_account(self, call_id: int, account_id: str) -> Optional[AttendanceRecord]:
        pass

    @abstractmethod
    async def get_by_call_and_character(self, call_id: int, character_name: str) -> Optional[AttendanceRecord]:
        pass

    @abstractmethod
    async def update_snapshots(self, call_id: int, raid_name: str, modifier: int) -> int:
        """
        Rewrite raid name and modifier snapshots of every record linked to a call

        Returns:
            Number of records updated
        """
        pass

    @abstractmethod
    async def delete(self, record: AttendanceRecord) -> None:
        """Delete one record together with its call link"""
        pass

    @abstractmethod
    async def delete_by_call(self, call_id: int) -> int:
        """
        Delete every record linked to a call together with the links

        Returns:
            Number of records deleted
        """
        pass

    @abstractmethod
    async def sum_linked_modifiers_by_account(self) -> Dict[str, int]:
        """Sum of modifier snapshots per account over call-linked records"""
        pass
