from launcher_settings.store.backends import async_s3, json_file, locmem


backend_classes = {
    'async_s3': async_s3.AsyncS3Backend,
    'json': json_file.JsonFileBackend,
    'locmem': locmem.SettingsBackend,
}
