import sqlite3
import threading
from typing import Dict, Iterable, List, Optional, Tuple

from utils.coc_data import DEFAULT_ALIAS_INDEX, resolve_alias


class AttributeDB:
    """角色屬性數據庫類"""
    def __init__(self, db_path: str = "attributes.db"):
        self.db_path = db_path
        self._locks: Dict[Tuple[int, int], threading.Lock] = {}
        self._locks_guard = threading.Lock()
        self.init_db()

    def init_db(self):
        """初始化數據庫"""
        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS attributes (
                guild_id INTEGER NOT NULL,
                user_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                value INTEGER NOT NULL,
                UNIQUE(guild_id, user_id, name)
            )
        ''')

        conn.commit()
        conn.close()

    def subject_lock(self, guild_id: int, user_id: int) -> threading.Lock:
        """同一角色的讀-改-寫必須串行"""
        key = (guild_id, user_id)
        with self._locks_guard:
            if key not in self._locks:
                self._locks[key] = threading.Lock()
            return self._locks[key]

    def get_value(self, guild_id: int, user_id: int, name: str,
                  alias_index: Dict[str, str] = DEFAULT_ALIAS_INDEX) -> Tuple[Optional[int], bool]:
        """讀取屬性，返回 (值, 是否存在)"""
        canonical = resolve_alias(name, alias_index)

        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()
        cursor.execute('''
            SELECT value FROM attributes
            WHERE guild_id = ? AND user_id = ? AND name = ?
        ''', (guild_id, user_id, canonical))
        row = cursor.fetchone()
        conn.close()

        if row:
            return row[0], True
        return None, False

    def set_value(self, guild_id: int, user_id: int, name: str, value: int,
                  alias_index: Dict[str, str] = DEFAULT_ALIAS_INDEX):
        """寫入或更新屬性"""
        self.set_values(guild_id, user_id, {name: value}, alias_index)

    def set_values(self, guild_id: int, user_id: int, values: Dict[str, int],
                   alias_index: Dict[str, str] = DEFAULT_ALIAS_INDEX) -> Tuple[int, int]:
        """批量寫入，返回 (有效數量, 同義詞數量)"""
        resolved = {}
        synonyms = 0
        for name, value in values.items():
            canonical = resolve_alias(name, alias_index)
            if canonical != name.strip():
                synonyms += 1
            resolved[canonical] = int(value)

        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()
        cursor.executemany('''
            INSERT INTO attributes (guild_id, user_id, name, value)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(guild_id, user_id, name)
            DO UPDATE SET value=excluded.value
        ''', [(guild_id, user_id, name, value) for name, value in resolved.items()])
        conn.commit()
        conn.close()

        return len(resolved), synonyms

    def delete_values(self, guild_id: int, user_id: int, names: Iterable[str],
                      alias_index: Dict[str, str] = DEFAULT_ALIAS_INDEX) -> Tuple[List[str], List[str]]:
        """刪除屬性，返回 (已刪除, 不存在)"""
        deleted = []
        failed = []

        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()
        for name in names:
            canonical = resolve_alias(name, alias_index)
            cursor.execute('''
                DELETE FROM attributes
                WHERE guild_id = ? AND user_id = ? AND name = ?
            ''', (guild_id, user_id, canonical))
            if cursor.rowcount:
                deleted.append(canonical)
            else:
                failed.append(name)
        conn.commit()
        conn.close()

        return deleted, failed

    def clear(self, guild_id: int, user_id: int) -> int:
        """清除角色的所有屬性"""
        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()
        cursor.execute('''
            DELETE FROM attributes WHERE guild_id = ? AND user_id = ?
        ''', (guild_id, user_id))
        count = cursor.rowcount
        conn.commit()
        conn.close()
        return count

    def get_all_values(self, guild_id: int, user_id: int) -> Dict[str, int]:
        """獲取角色的所有屬性"""
        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()
        cursor.execute('''
            SELECT name, value FROM attributes
            WHERE guild_id = ? AND user_id = ?
        ''', (guild_id, user_id))
        rows = cursor.fetchall()
        conn.close()

        return {name: value for name, value in rows}

    def view(self, guild_id: int, user_id: int,
             alias_index: Dict[str, str] = DEFAULT_ALIAS_INDEX) -> "AttributeView":
        return AttributeView(self, guild_id, user_id, alias_index)


class AttributeView:
    """綁定到單一角色的屬性存取，也是表達式求值時的上下文"""
    def __init__(self, db: AttributeDB, guild_id: int, user_id: int,
                 alias_index: Dict[str, str] = DEFAULT_ALIAS_INDEX):
        self.db = db
        self.guild_id = guild_id
        self.user_id = user_id
        self.alias_index = alias_index

    def get(self, name: str) -> Tuple[Optional[int], bool]:
        return self.db.get_value(self.guild_id, self.user_id, name, self.alias_index)

    def set(self, name: str, value: int):
        self.db.set_value(self.guild_id, self.user_id, name, value, self.alias_index)

    def canonical(self, name: str) -> str:
        return resolve_alias(name, self.alias_index)

    def lock(self) -> threading.Lock:
        return self.db.subject_lock(self.guild_id, self.user_id)
